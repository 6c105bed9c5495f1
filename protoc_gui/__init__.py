"""Desktop front-end for the protocol buffer compiler"""
__version__ = "0.1.0"
