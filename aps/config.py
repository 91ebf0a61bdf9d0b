FLATHUB_API = "https://flathub.org/api/v2"


class Config:
    api_url = FLATHUB_API
    remote = "flathub"
    locale = "en"
    hits_per_page = 21

    # Demo mode (no flatpak on this host)
    demo_delay = 2

    # None means requests waits forever
    http_timeout = None

config = Config()
