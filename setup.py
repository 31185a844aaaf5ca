"""
Lighthouse audit tool - web quality audits against a live browser page
"""
from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

with open("requirements-dev.txt", "r", encoding="utf-8") as fh:
    test_requirements = [line.strip() for line in fh if line.strip() and not line.startswith(("#", "-r"))]

setup(
    name="lighthouse-tool",
    version="0.1.0",
    description="Lighthouse audits of a live Playwright page exposed as a host tool",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={"test": test_requirements},
    entry_points={
        "console_scripts": [
            "lighthouse-tool=core.cli:main",
        ],
    },
)
