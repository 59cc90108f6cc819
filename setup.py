from setuptools import find_packages, setup

setup(
    name="mongocli",
    version="1.0.0",
    description="mongo-cli - ad-hoc MongoDB document operations from the command line",
    packages=find_packages(include=["mongocli", "mongocli.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework (0.26+ vendors its own click)
        "click",  # Prompt/abort primitives under typer
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting
        "pymongo",  # MongoDB
        "mongomock",  # In-memory MongoDB backend
        "pyyaml",  # YAML output
        "python-dotenv",  # .env loading
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "mongo-cli=mongocli.cli:main",
        ],
    },
)
