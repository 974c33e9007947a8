"""
setup.py for Sonogram pip package.


Creating a Sonogram Development Conda Environment
-------------------------------------------------

To create a Conda environment for Sonogram development, issue the
following commands from the directory containing this file:

    conda create -n sonogram-dev python=3.11
    conda activate sonogram-dev
    pip install -e .


Running Sonogram Unit Tests
---------------------------

To run the unit tests:

    conda activate sonogram-dev
    python -m unittest discover -s sonogram -t .

To run the unit tests for just one subpackage of the `sonogram` package:

    python -m unittest discover -s sonogram/<subpackage> -t .


Building the Sonogram Package
-----------------------------

To build the Sonogram package:

    conda activate sonogram-dev
    python -m build

The build process will write package `.tar.gz` and `.whl` files to the
`dist` subdirectory of the directory containing this file.
"""


from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from setuptools import find_packages, setup


def load_version_module(package_name):
    module_name = f'{package_name}.version'
    file_path = Path(__file__).parent / package_name / 'version.py'
    spec = spec_from_file_location(module_name, file_path)
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


version = load_version_module('sonogram')


setup(

    name='sonogram',
    version=version.full_version,
    description=(
        'Spectrogram computation and rendering for audio waveforms.'),
    license='GPL-3.0-or-later',

    packages=find_packages(

        # We exclude the unit test packages from distributions.
        exclude=['tests', 'tests.*', '*.tests.*', '*.tests']

    ),

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Operating System :: OS Independent',
    ],

    python_requires='>=3.9',

    install_requires=[
        'numpy',
        'Pillow',                  # PNG encoding
        'ruamel.yaml',             # settings files
        'scipy',                   # data windows
    ],

    entry_points={
        'console_scripts': [
            'sonogram=sonogram.scripts.create_spectrogram:_main',
        ]
    },

    include_package_data=True,
    zip_safe=False

)
