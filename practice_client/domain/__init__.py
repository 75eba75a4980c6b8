"""Typed resource clients over the API gateway"""
