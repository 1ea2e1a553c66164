#! /usr/bin/env python
""" Distribution file for sjisutf. """
import os

from setuptools import setup

HERE = os.path.dirname(__file__)
README = 'README.rst'


setup(name='sjisutf',
      version='1.0.0',
      description=("Shift_JIS <-> UTF-8 conversion and hex dumps for "
                   "legacy game archive tools"),
      long_description=open(os.path.join(HERE, README)).read(),
      keywords="shift_jis sjis cp932 utf8 codec hankaku kana hexdump",
      license='GPLv2+',
      packages=['sjisutf', 'sjisutf.encodings'],
      package_data={
          '': [README],
      },
      python_requires='>=3.6',
      install_requires=[
          'blessed>=1.17.8,<2',
          'wcwidth>=0.2.4,<1',
      ],
      extras_require={
          'test': (
              'pytest>=6',
          )
      },
      entry_points={
          'console_scripts': ['sjisutf=sjisutf.engine:main'],
      },
      classifiers=[
          'Environment :: Console',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)',
          'Natural Language :: Japanese',
          'Operating System :: OS Independent',
          'Programming Language :: Python :: 3',
          'Topic :: Games/Entertainment',
          'Topic :: Software Development :: Libraries',
          'Topic :: Text Processing',
      ],
      zip_safe=False,
)
