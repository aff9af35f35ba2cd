from setuptools import find_packages, setup

setup(
    name="shortlinks",
    version="0.1.0",
    description="Find #123 and owner/repo#123 issue shortlinks in free-form text",
    author="William Wieselquist",
    packages=find_packages(include=["shortlinks", "shortlinks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "shortlinks=shortlinks.cli:main",
        ],
    },
)
