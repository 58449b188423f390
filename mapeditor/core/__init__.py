"""
Editor core: constants and pygame surface conversion.
"""
