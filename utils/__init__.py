"""Persistence helpers"""
