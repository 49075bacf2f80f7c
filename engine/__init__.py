"""Neural Net Wars simulation engine"""
