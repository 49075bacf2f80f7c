"""Neural Net Wars rendering helpers"""
