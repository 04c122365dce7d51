'''
Created on Oct 18, 2026

@author: pleyte
'''

class LogConfig(object):
    '''
    dictConfig dictionaries for logging to the console (stderr) or to a file
    '''

    def __init__(self, log_filename='nirvana_cnv.log'):
        '''
        Constructor
        '''
        self.stderr_config = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'standard': {
                    'format': '%(levelname)s: %(name)s::%(module)s:%(lineno)s: %(message)s'
                },
            },
            'handlers': {
                'default': {
                    'formatter': 'standard',
                    'class': 'logging.StreamHandler',
                    'stream': 'ext://sys.stderr'
                },
            },
            'loggers': {
                '': {  # root logger
                    'level': 'WARNING',
                    'handlers': ['default'],
                    'propagate': False
                },
                'nirvana_cnv': {
                    'level': 'INFO',
                    'handlers': ['default'],
                    'propagate': False,
                },
                '__main__': {
                    'level': 'INFO',
                    'handlers': ['default'],
                    'propagate': False,
                }
            }
        }

        self.file_config = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'standard': {
                    'format': '%(asctime)s: %(levelname)s: %(name)s::%(module)s:%(lineno)s: %(message)s'
                },
            },
            'handlers': {
                'default': {
                    'formatter': 'standard',
                    'class': 'logging.FileHandler',
                    'filename': log_filename,
                    'mode': 'a'
                },
            },
            'loggers': {
                '': {  # root logger
                    'level': 'WARNING',
                    'handlers': ['default'],
                    'propagate': False
                },
                'nirvana_cnv': {
                    'level': 'DEBUG',
                    'handlers': ['default'],
                    'propagate': False,
                },
                '__main__': {
                    'level': 'DEBUG',
                    'handlers': ['default'],
                    'propagate': False,
                }
            }
        }
