from setuptools import find_packages, setup

setup(
    name="hostsvc",
    version="0.3.0",
    description="Run a program as a native background service (systemd backend)",
    author="William Wieselquist",
    packages=find_packages(include=["hostsvc", "hostsvc.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and descriptor validation
        "typer<0.26",  # CLI (0.26+ vendors its own click)
        "click",  # Context and exceptions underneath typer
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-timeout>=2.1",
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "hostsvc=hostsvc.cli:main",
        ],
    },
)
