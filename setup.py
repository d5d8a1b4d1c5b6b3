from setuptools import setup, find_packages

setup(
    name="league-standings-elo",
    version="0.1.0",
    description="League standings with Elo ratings, strength of schedule and points percentage",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=1.5.3",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "league-standings=league_elo.main:main",
        ],
    },
)
