"""Neural Net Wars agents"""
