from setuptools import setup, find_packages

# All dependencies
install_requires = [
    # Coloured console logging
    "colorama>=0.4.6",
    # Configuration files and --show output
    "PyYAML>=6.0.1",
    "tomli>=2.0.1; python_version < '3.11'",
    # Configuration diagnostics
    "jsonschema>=4.19.0",
]

# Development dependencies
extras_require = {
    'dev': [
        'pytest>=7.4.0',
        'pytest-cov>=4.1.0',
        'black>=23.7.0',
        'isort>=5.12.0',
        'mypy>=1.4.1',
        'flake8>=6.1.0',
    ],
    'test': [
        'pytest>=7.4.0',
    ],
}

setup(
    name="propfilter",
    version="1.0.0",
    license='GNU GPLv3',
    description="Property inclusion and exclusion filters for JSON output",
    packages=find_packages(include=["propfilter", "propfilter.*"]),
    python_requires='>=3.9',
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "propfilter=propfilter.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.9",
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        "Operating System :: OS Independent",
    ],
)
