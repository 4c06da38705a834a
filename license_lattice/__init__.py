"""
license_lattice: decides whether package license expressions satisfy a
license policy, by comparing boolean-lattice formulas over license terms.
"""

__version__ = "1.0.0"
