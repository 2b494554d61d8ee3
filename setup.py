from setuptools import setup, find_packages

setup(
    name="flight-time-calculator",
    version="0.1.0",
    description="Duration expression calculator for flight and duty time",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "flight-time-calc=flight_time_calculator.cli:main",
        ],
    },
)
