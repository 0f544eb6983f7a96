from setuptools import setup, find_packages

setup(
    name='mapwise',
    version='1.0.0',
    description='Index and group sequences of records into ordered dictionaries.',
    license='MIT',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2',
    ],
    extras_require={
        'test': [
            'pytest',
            'pyyaml',
        ],
    },
)
