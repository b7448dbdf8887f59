from setuptools import find_packages, setup

setup(
    name="sstarter",
    version="0.1.0",
    description="Run services under a graceful-restart helper (start_server) with PID-file supervision",
    packages=find_packages(include=["sstarter", "sstarter.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schema validation
        "typer<0.26",  # CLI framework; 0.26+ vendors its own click, breaking click.get_current_context
        "click",  # Typer's underlying context and exceptions
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
        "pygments",  # Output syntax highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "sstarterc=sstarter.cli:main",
        ],
    },
)
