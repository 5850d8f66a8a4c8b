from setuptools import setup, find_packages

setup(
    name="gitguy",
    version="0.1.0",
    description="Terminal git diff viewer w/ AI-generated commit messages & PR descriptions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer<0.26",
        "rich",
        "readchar",
        "pygments",
        "openai",
        "python-dotenv",
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "gitguy=gitguy.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
