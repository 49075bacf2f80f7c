"""Neural Net Wars neural network brains"""
