"""
Domain value objects: alphabets, padding policies, configurations, generated
inputs, expected errors and counterexamples.
"""
