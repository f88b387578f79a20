"""Core: configuration et fichiers"""
