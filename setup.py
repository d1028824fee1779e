from setuptools import setup, find_packages


setup(
    name="frametar",
    version="0.1",
    packages=find_packages(include=["frametar", "frametar.*"]),
    description="In-memory POSIX ustar archive writer for rendered animation frames.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[],
)
