# Always prefer setuptools over distutils
from os import path
from setuptools import setup, find_packages

here = path.abspath(path.dirname(__file__))


# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='krakenapi',  # Required
    version='0.1.0',  # Required
    description='Async client for the Kraken REST API',  # Optional
    long_description=long_description,  # Optional
    long_description_content_type='text/markdown',  # Optional
    classifiers=[  # Optional
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Office/Business :: Financial',
        'Programming Language :: Python :: 3',
    ],
    package_dir={'': 'src'},  # Optional
    packages=find_packages(where='src'),  # Required
    python_requires='>=3.8, <4',
    install_requires=[
        'click>=7',
        'httpx>=0.23',
        'pydantic>=2, <3',
        'python-dotenv>=0.10',
        'stackprinter>=0.2',
        'structlog>=20',
        'ujson>=1',
    ],
    extras_require={
        'test': [
            'pytest>=6',
            'pytest-asyncio>=0.17',
        ],
    },
    entry_points={  # Optional
        'console_scripts': [
            'kraken-query=krakenapi.cli:query',
        ],
    },
)
