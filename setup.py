from setuptools import setup, find_packages

setup(
    name="zzz",
    version="0.1.0",
    description="Sleep for a while, showing the time left in the terminal",
    packages=find_packages(include=["zzz", "zzz.*"]),
    install_requires=[
        "typer",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "zzz=zzz.main:app",
        ],
    },
    python_requires=">=3.10",
)
