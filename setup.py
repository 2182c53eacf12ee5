from setuptools import setup, find_packages

setup(
    name="kiroweenscore",
    version="1.0.0",
    description="Rule-based category fit and judging scores for Kiroween hackathon submissions",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "jsonschema>=4.20.0",
        "markdown>=3.5.1",
        "beautifulsoup4>=4.12.2",
        "click>=8.1.7",
        "tqdm>=4.66.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kiroweenscore=kiroweenscore.cli:main",
        ],
    },
    python_requires=">=3.8",
)
