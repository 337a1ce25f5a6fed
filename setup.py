from setuptools import setup, find_packages
setup(
    name='envschema',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    package_data={
        'envschema': [
            'templates/*.yaml',
            'templates/*.env',
        ],
    },
    description='Declare, load and validate environment variables.',
    author='Your Name',
    author_email='youremail@example.com',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'pydantic>=2.0.0',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'envschema = envschema.cli:program.run',
        ],
    },
)
