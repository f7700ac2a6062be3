from setuptools import setup, find_packages

setup(
    name="ghin",
    version="0.1.0",
    description="Typed client for the GHIN golf handicap service",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"ghin": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        'requests>=2.31.0',
        'urllib3>=2.0.0',
        'pydantic>=2.6',
        'PyYAML>=6.0',
        'tabulate>=0.9.0',
        'typing_extensions>=4.5.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ]
    },
    entry_points={
        'console_scripts': [
            'ghin=ghin.cli:main'
        ]
    }
)
