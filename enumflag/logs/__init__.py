# coding: utf-8

'''
Logging for enumflag. Use:

  from enumflag.logs import log
'''
