"""alttime Package setup file."""
# Third Party Imports
import setuptools

setuptools.setup(
    name="alttime",
    description="Exact, overflow-checked conversion between a decimal alternate time scale and standard time",
    version="1.0.0",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    package_data={
        "alttime.common": [
            "default_behavior.config",
        ],
    },
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.19",
    ],
    extras_require={
        "dev": [
            # Linting
            "ruff==0.1.1",
            # Type Checking
            "mypy==1.6.0",
            # Formatters
            "black==23.9.1",
            "isort[colors]==5.12.0",
        ],
        "test": [
            "pytest>=7.4.2",
            "pytest-randomly>=3.15.0",
            "coverage>=7.3.2",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "alttime=alttime:main",
        ]
    },
    zip_safe=False,
)
