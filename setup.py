from setuptools import setup, find_packages

setup(
    name='cssbundle',
    version='0.1.0',
    py_modules=['cssbundle', 'builder'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'cssbundle = cssbundle:main',
        ],
    },
)
