#!/usr/bin/env python

from setuptools import setup

def readme():
    with open('README.md') as f:
        return f.read()

setup(name='spike_train_analysis',
      version='0.1.0',
      description='Windowed correlation and intensity measures for spike trains',
      long_description=readme(),
      long_description_content_type='text/markdown',
      packages=['spike_train_analysis', 'spike_train_analysis.stats'],
      license='MIT',
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Developers',
          'Intended Audience :: Science/Research',
          'License :: OSI Approved :: MIT License',
          'Topic :: Scientific/Engineering'
      ],
      keywords='neuroscience spike-trains point-process correlation',
      install_requires=['numpy', 'scipy', 'pandas'],
      extras_require={'test': ['pytest']},
)
