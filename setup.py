from setuptools import setup, find_packages

setup(
    name='cleancharge',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={'cleancharge': ['configs/*.yml']},
    python_requires='>=3.10',
    install_requires=[
        'PyYAML',      # For parsing YAML config files
        'requests',    # For HTTP requests to the Carbon Intensity API
        'click',       # For the command line
        'fastapi',     # For the HTTP API
        'uvicorn',     # For serving the HTTP API
    ],
    extras_require={
        'test': [
            'pytest',
            'httpx',   # Required by fastapi.testclient
        ],
    },
    entry_points={
        'console_scripts': [
            'cleancharge=cleancharge.cli:main',
        ],
    },
    description='Forecast clean-energy share of GB generation and find the best EV charging window.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
