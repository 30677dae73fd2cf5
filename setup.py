from setuptools import setup, find_packages
import sys

if sys.version_info[:2] < (3, 8):
    sys.stdout.write('Python 3.8 or later is required\n')
    sys.exit(1)

setup(
    name='bicon',
    use_scm_version={'write_to': 'src/bicon/_version.py', 'fallback_version': '0.1.0'},
    setup_requires=['setuptools_scm'],  # Support pip versions that don't know about pyproject.toml
    author='',
    author_email='',
    url='',
    description='biconnected component decomposition of interactively drawn undirected graphs',
    long_description='',
    license='MIT',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=[
        'xopen>=0.5.0',
        'pandas',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    entry_points={'console_scripts': ['bicon = bicon.__main__:main']},
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics',
    ]
)
