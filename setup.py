#!/usr/bin/python3
from os import system

from setuptools import Command
from setuptools import find_packages
from setuptools import setup


# taken from http://stackoverflow.com/a/3780822
class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


setup(
    name='completiontools',
    version='0.1.0',
    license='MIT',
    description='Word completion with a generic ternary search tree.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    author='Christian Adam',
    author_email='kuchenrolle@googlemail.com',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        # complete classifier list:
        # http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: Unix',
        'Operating System :: POSIX',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python :: 3',
        'Topic :: Utilities',
        'Topic :: Text Processing :: Indexing',
    ],
    keywords=[
        'ternary search tree', 'autocomplete', 'prefix search'
    ],
    install_requires=[
        'psutil', 'requests'
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'completiontools = completiontools.__main__:main',
        ]
    },
    cmdclass={
        'clean': CleanCommand,
    },
)
