"""
Growing guide generator.

Responsibilities:
- Derive variety traits once from a catalog Item.
- Build the seven lifecycle stages from those traits.
- Attach generic and variety-specific product recommendations.
"""
