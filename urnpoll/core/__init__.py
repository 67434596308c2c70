"""
Core value types of the urn model.

- `names`: labels and typed aliases
- `errors`: the single input-contract error
- `population`: the urn
- `model`: samples, estimates and sweep results
"""
