# %% [markdown]
# # fuzzyrank: Quickstart
#
# **Type a few letters, get the right item first.**
#
# ---
#
# ## The Problem
#
# Pickers for files, commands and menu items let the user type a handful of
# characters and expect the right entry at the top:
#
# ```
# "gci"    ->  Get-ChildItem
# "smain"  ->  src/main.py
# "crd"    ->  Card
# ```
#
# **fuzzyrank** drops every candidate that does not contain the typed
# characters in order and scores the rest.
#
# ---
#
# ## Table of Contents
#
# | Part | Topic | Description |
# |------|-------|-------------|
# | 1 | The Hook | Filter a command list as the user types |
# | 2 | How a Score Is Built | The four measures behind every score |
# | 3 | Polars | Score a column, filter a DataFrame |
# | 4 | Production Patterns | Prepared queries, threads, bad input |

# %%
import warnings

import polars as pl

import fuzzyrank as fk

# %% [markdown]
# ---
# ## Part 1: The Hook

# %%
commands = [
    "Get-ChildItem",
    "Get-Content",
    "Get-Command",
    "Set-Content",
    "Select-Object",
    "Select-String",
    "Sort-Object",
    "Where-Object",
]

for typed in ["g", "gc", "gci", "sel", "obj"]:
    top = fk.best_matches(commands, typed, limit=3)
    print(f"{typed!r:7} -> {[m.result for m in top]}")

# %% [markdown]
# `fuzzy_match` keeps input order and leaves sorting to you.
# Candidates that fail the quick filter are simply absent.

# %%
print(fk.fuzzy_match("crd", ["Card", "Cartoon", "zzz"]))

# %% [markdown]
# ---
# ## Part 2: How a Score Is Built
#
# ```
# score = (100 - levenshtein) * len(longest_common_substring)
#         - span_length - span_index + len(common_prefix)
# ```

# %%
for candidate in ["Card", "cord", "crowd", "discard"]:
    print(fk.explain("crd", candidate))

# %% [markdown]
# The individual measures are available on their own.

# %%
print(fk.levenshtein("kitten", "sitting"))
print(fk.longest_common_substring("abcdef", "zbcdf"))
print(fk.common_prefix("abc", "abd"))
print(fk.match_span("ac", "xabc"))

# %% [markdown]
# ---
# ## Part 3: Polars

# %%
files = pl.DataFrame(
    {
        "path": ["src/main.py", "src/util.py", "tests/test_main.py", "README.md"],
        "size": [1200, 800, 640, 2048],
    }
)

print(fk.fuzzy_filter(files, "path", "main"))
print(files.with_columns(score=pl.col("path").fuzzy.score("tm")))

# %% [markdown]
# ---
# ## Part 4: Production Patterns
#
# Prepare a query once when scoring candidates one at a time.

# %%
matcher = fk.FuzzyMatcher("gci")
for line in ["Get-ChildItem", "Get-Content"]:
    print(line, matcher.score(line))

# %% [markdown]
# Large lists can be scored on a thread pool; output order is unchanged.

# %%
big = [f"item_{i:05d}" for i in range(10_000)]
assert fk.batch.score(big, "i99", workers=4) == fk.fuzzy_match("i99", big)

# %% [markdown]
# None is rejected immediately instead of being treated as empty.

# %%
try:
    fk.fuzzy_match(None, commands)
except fk.ValidationError as exc:
    print(f"ValidationError: {exc}")

# Skipped candidates surface as ComputationWarning
warnings.simplefilter("always", fk.ComputationWarning)
