from setuptools import setup, find_packages

setup(
    name="namescrub",
    version="1.0.0",
    description="Recursively strip control characters from file and directory names",
    author="Ashwin Nair",
    packages=find_packages(include=["namescrub", "namescrub.*"]),
    python_requires=">=3.8",
    install_requires=[
        "rich>=13.0",
        "argcomplete>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "namescrub = namescrub.cli:main"
        ],
    },
)
