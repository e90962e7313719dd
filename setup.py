from setuptools import setup, find_packages

setup(
    name="connect4bot",
    version="0.1.0",
    description="Connect-four rules engine with a minimax alpha-beta bot opponent",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "connect4bot=connect4bot.interfaces.cli:main",
        ],
    },
)
