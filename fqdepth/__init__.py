__version__ = '0.1.0'
version_string = 'fqdepth {}'.format(__version__)
