"""
Core модули fraction_tree: доменные модели, алгебра медиант, кэш, контракты.
"""
