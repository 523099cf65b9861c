from setuptools import find_packages, setup

setup(
    name="snaptest",
    version="0.1.0",
    description="Pluggable snapshot testing: record, compare and report on-disk reference snapshots",
    packages=find_packages(include=["snaptest", "snaptest.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models
        "typer<0.26",  # CLI; 0.26+ vendors its own click, which the CLI code cannot see
        "click",  # CLI context and usage errors
        "rich",  # Terminal formatting
        "jinja2",  # Failure report templates
        "pyyaml",  # YAML command output
        "bsdiff4",  # Binary patch size in data diffs
        "numpy",  # Pixel agreement for image diffs
        "Pillow",  # PNG encoding and decoding
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "snaptest=snaptest.cli:main",
        ],
        "pytest11": [
            "snaptest.pytest_plugin = snaptest.pytest_plugin",
        ],
    },
)
