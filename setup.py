from setuptools import setup

setup(
    name='nupy-frontend',
    version='0.1.0',
    description='nuPython scanner and recursive-descent syntax checker',
    author='nupy developers',
    package_dir={'nupy': 'src/nupy'},
    packages=['nupy', 'nupy.parser', 'nupy.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'nupy = nupy.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
