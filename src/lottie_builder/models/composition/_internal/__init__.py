"""Internal document wrappers for the composition package"""
