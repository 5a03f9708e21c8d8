from setuptools import setup, find_packages

# Read version from the package's version module without importing pexlog
version = {}
with open("src/pexlog/_version.py", encoding="utf-8") as f:
    exec(f.read(), version)

setup(
    name="pexlog",
    version=version["PIP_VERSION"],
    description="Severity thresholds, hierarchical log names, and a process-wide default log",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest", "pytest-cov"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
