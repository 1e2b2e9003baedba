from setuptools import setup

setup(name='pyhotspot',
      version='0.1.0',
      description='Synthetic death hotspot point clouds rendered on a responsive map.',
      url='https://github.com/pyhotspot/pyhotspot',
      author='pyhotspot developers',
      license='MIT',
      packages=['pyhotspot'],
      include_package_data = True,
      python_requires='>=3.9',
      install_requires=[
          'numpy',
          'scipy',
          'matplotlib>=3.6',
          'shapely>=2.0',
          'httpx',
      ],
      extras_require={
          'test': ['pytest', 'pillow'],
      },
      dependency_links=[
          ],
      zip_safe=False)
