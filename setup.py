"""gf2prim setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import gf2prim

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='gf2prim',
    version=gf2prim.__version__,
    description='gf2prim -- Primitive polynomials and binary fields GF(2^d) in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite field', 'Galois field', 'GF(2)', 'binary field',
              'primitive polynomial', 'carry-less multiplication'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=gf2prim.__license__,
    packages=['gf2prim'],
    platforms=['any'],
    python_requires='>=3.8',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']}
)
