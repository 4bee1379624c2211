"""
switchyard
"""
import codecs
import os
import re

from setuptools import setup, find_packages


with codecs.open(os.path.join(os.path.abspath(os.path.dirname(
        __file__)), 'src', 'switchyard', '__init__.py'), 'r', 'latin1') as fp:
    try:
        version = re.findall(r"^__version__ = '([^']+)'\r?$",
                             fp.read(), re.M)[0]
    except IndexError:
        raise RuntimeError('Unable to determine version.')


setup(
    name='switchyard',
    version=version,
    license='MIT',
    description='An HTTP request router with method scoping, ' +
                'wildcard capture and lock-free concurrent lookups',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    keywords=['web', 'http', 'router'],
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': ['pytest', 'hypothesis>=6.90'],
        'examples': ['uvloop>=0.11.3'],
    },
    entry_points="""
         [console_scripts]
         switchyard = switchyard.__main__:main
    """,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Internet :: WWW/HTTP'
    ],
    zip_safe=False,
)
