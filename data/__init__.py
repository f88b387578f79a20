"""Data Layer"""
