"""
Configuration module for solvelog.
"""
