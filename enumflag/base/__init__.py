# coding: utf-8

'''
Flag algebra, null object, and exception types.
'''
