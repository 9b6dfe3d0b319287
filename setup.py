#!/usr/bin/env python
"""
Setup.py distribution file for antsy.

https://github.com/schrockwell/antsy
"""
# std imports
import os

# 3rd party
import setuptools


def _get_here(fname):
    return os.path.join(os.path.dirname(__file__), fname)


def _get_version(fname, key='package'):
    import json
    with open(fname, 'r') as fin:
        return json.load(fin)[key]


class _SetupUpdate(setuptools.Command):
    # Regenerates antsy/table_sgr.py, "setup.py update" is kept as an alias
    # of running bin/update-tables.py directly.
    description = "Regenerate the SGR code table"
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        import sys
        import subprocess
        retcode = subprocess.Popen([
            sys.executable,
            _get_here(os.path.join('bin', 'update-tables.py'))]).wait()
        assert retcode == 0, ('non-zero exit code', retcode)


def main():
    """Setup.py entry point."""
    setuptools.setup(
        name='antsy',
        version=_get_version(
            _get_here(os.path.join('antsy', 'version.json'))),
        description="Decodes ANSI escape sequences",
        long_description=open(
            _get_here('README.rst'), encoding='utf8').read(),
        license='MIT',
        packages=['antsy'],
        url='https://github.com/schrockwell/antsy',
        package_data={
            'antsy': ['*.json'],
            '': ['LICENSE.txt', '*.rst'],
        },
        python_requires='>=3.8',
        install_requires=[],
        extras_require={
            'cli': ['blessed>=1.20'],
            'tests': ['pytest', 'blessed>=1.20'],
            'update': ['jinja2', 'typing_extensions; python_version < "3.11"'],
        },
        entry_points={
            'console_scripts': ['antsy=antsy.cli:main'],
        },
        zip_safe=True,
        classifiers=[
            'Intended Audience :: Developers',
            'Natural Language :: English',
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'License :: OSI Approved :: MIT License',
            'Operating System :: POSIX',
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: 3.8',
            'Programming Language :: Python :: 3.12',
            'Topic :: Software Development :: Libraries',
            'Topic :: Terminals'
        ],
        keywords=[
            'ansi',
            'console',
            'decoder',
            'escape',
            'sgr',
            'terminal',
            'vt100',
            'xterm',
        ],
        cmdclass={'update': _SetupUpdate},
    )


if __name__ == '__main__':
    main()
