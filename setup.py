"""Setup file for the package."""

from setuptools import setup, find_packages

setup(
    name="quotegen",
    version="1.0.0",
    packages=find_packages(include=["quotegen", "quotegen.*"]),
    package_data={"quotegen": ["data/*.txt"]},
    install_requires=[
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
        "google-api-python-client>=2.100.0",
        "google-auth>=2.23.0",
        "google-auth-oauthlib>=1.1.0",
        "phonenumbers>=8.13.0",
        "inflection>=0.5.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'quotegen=quotegen.main:main',
        ],
    },
    description="Generate sales quotations from Google Docs templates and log them in Google Sheets",
    python_requires='>=3.8',
)
