# coding: utf-8

'''
Unit test helpers: ZestBase test case and test data paths.
'''
