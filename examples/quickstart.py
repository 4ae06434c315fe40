# %% [markdown]
# # asearch: Quick Start
#
# **Typo-tolerant matching for short patterns**
#
# Compile a pattern once, then ask whether queries match it with at most
# `ambiguity` typos (insertions, deletions or substitutions).
#
# | Part | Topic |
# |------|-------|
# | 1 | Exact matching with typos |
# | 2 | Substring and wildcard modes |
# | 3 | Search over lists and DataFrames |
# | 4 | Watching the automaton |

# %%
import logging

import polars as pl

import asearch as asr

# %% [markdown]
# ---
# ## Part 1: Exact matching with typos

# %%
a = asr.Asearch("abcde")

for query, ambiguity in [("abcde", 0), ("aBCDe", 0), ("abXcde", 0), ("abXcde", 1), ("abXXde", 2)]:
    print(f"  match({query!r}, {ambiguity}) -> {a.match(query, ambiguity)}")

print(f"\nEdits needed for 'abXXde': {a.distance('abXXde')}")

# %% [markdown]
# ---
# ## Part 2: Substring and wildcard modes
#
# `INCLUDE` finds the pattern anywhere in the query; `WILDCARD_SPACE` lets a
# space in the pattern stand for any run of characters.

# %%
include = asr.Asearch("ficton", asr.MatchMode.INCLUDE)
print(f"'Pulp Fiction' with 1 typo: {include.match('Pulp Fiction', 1)}")

wildcard = asr.Asearch("ab de", asr.MatchMode.WILDCARD_SPACE)
for query in ["abcde", "abXXXXXXXde", "abcccccxe"]:
    print(f"  {query!r}: exact={wildcard.match(query)} one-typo={wildcard.match(query, 1)}")

# %% [markdown]
# ---
# ## Part 3: Search over lists and DataFrames

# %%
movies = [
    "The Shawshank Redemption",
    "The Godfather",
    "The Dark Knight",
    "Pulp Fiction",
    "Fight Club",
    "Inception",
    "The Matrix",
]

print(asr.Asearch("godfahter", "include").filter(movies, ambiguity=2))

df = pl.DataFrame({"title": movies})
print(df.filter(pl.col("title").asearch.is_match("matrx", 1, mode="include")))
print(asr.match_series(df["title"], "inceptoin", ambiguity=2))

# %% [markdown]
# ---
# ## Part 4: Watching the automaton
#
# Attach a tracer to see which states are active after every character.
# `tracer_from_env()` returns a logging tracer when `ASEARCH_VERBOSE=1`.

# %%
logging.basicConfig(level=logging.DEBUG, format="%(message)s")
traced = asr.Asearch("abcde", tracer=asr.LoggingTracer())
traced.match("abXde", 1)

quiet_or_verbose = asr.Asearch("abcde", tracer=asr.tracer_from_env())
quiet_or_verbose.match("abde", 1)
