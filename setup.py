# setup.py
from setuptools import setup, find_packages

setup(
    name="seo_robots",
    version="2.0.0",
    description="Движок правил robots-директив: meta robots и X-Robots-Tag",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"seo_robots": ["templates/*.j2"]},
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["seo-robots=seo_robots.cli:cli"],
    },
    python_requires=">=3.11",
)
