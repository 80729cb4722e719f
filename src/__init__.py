"""
Recipe import pipeline
"""
