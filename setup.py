from setuptools import setup, find_packages

setup(
    name='gridsheet',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=['pyarrow'],  # Numeric snapshot of the grid
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'gridsheet=grid_sheet.cli:main'
        ]
    },
    author='GridLang Team',
    description='A fixed-size spreadsheet model with additive formulas and full-sheet recalculation',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='LGPLv3.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
    python_requires='>=3.8',
)
