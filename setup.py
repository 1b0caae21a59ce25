import re

from setuptools import setup, find_packages


install_requires = [
    "click>=8.1.8",
]

tests_requires = [
    "coverage[toml]==7.6.10",
    "flake8",
    "isort",
    "pytest==8.3.4",
    "pytest-cov==6.0.0",
]

with open("README.rst") as fh:
    long_description = re.sub(
        "^.. start-no-pypi.*^.. end-no-pypi", "", fh.read(), flags=re.M | re.S
    )

setup(
    name="trim-margin",
    version="0.1.0",
    description="Remove the layout margin from multi-line strings",
    long_description=long_description,
    zip_safe=False,
    install_requires=install_requires,
    tests_require=tests_requires,
    extras_require={"test": tests_requires},
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    entry_points={"console_scripts": {"trim-margin = trim_margin.cli:main"}},
    license="Apache-2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
