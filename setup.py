from setuptools import setup, find_packages
import wastjs


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='wastjs',
    description="Translate WebAssembly spec test scripts into JavaScript shell tests",
    long_description=long_description,
    version=wastjs.__version__,
    author='wastjs developers',
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    entry_points={
        'console_scripts': [
            'wastjs-translate = wastjs.cli.wast2js:wast2js',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: JavaScript',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Code Generators',
        'Topic :: Software Development :: Testing',
    ]
)
