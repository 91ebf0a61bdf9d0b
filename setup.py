from setuptools import setup, find_packages

setup(
    name="aps",
    version="0.1.0",
    description="aps: App Center CLI for Flathub and flatpak",
    author="Alkama Sudad",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["rich", "requests"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "aps=aps.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
