from setuptools import find_packages, setup

setup(
    name="wavstat",
    version="0.1.0",
    description="Recursive WAV duration statistics",
    packages=find_packages(include=["wavstat", "wavstat.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.27.3",  # CLI; usage errors derive from typer.TyperException
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "pyyaml",  # YAML output
        "pygments",  # Highlighted JSON/YAML on a terminal
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "wavstat=wavstat.cli:main",
        ],
    },
)
