from setuptools import setup, find_packages


setup(
    name="oggcrc",
    version="0.1",
    packages=find_packages(),
    description="The non-reflected CRC-32 (polynomial 0x04C11DB7) used to check Ogg pages.",
    author="vercingetorx",
    install_requires=[],
)
