"""
holds submodules related to collapsing clusters of redundant structural variant calls
"""
__version__ = '0.1.0'
