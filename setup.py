#!/usr/bin/env python3
import os

from setuptools import setup


install_requires = [
    'click',
    'netflix-spectator-py<0.2',
    'psutil',
    'schedule'
]

tests_require = [
    'pytest'
]

setup(name='sysload',
      description='Rolling system load averages computed from CPU time deltas',
      version=os.getenv("SYSLOAD_VERSION", "0.dev0"),
      install_requires=install_requires,
      extras_require={'test': tests_require},
      packages=[
          "sysload",
          "sysload.config",
          "sysload.cpu",
          "sysload.load",
          "sysload.metrics"])
