# nerdrules

Weighted implication rules of the form `body => head`, for systems that
learn rules from observations and adjust their confidence in them over time.

A rule has a body (one or more literals that must all hold), a head (the
literal it concludes) and a weight that never drops below zero.

## Installation

    pip install nerdrules

## Literals and contexts

The package does not define a literal type. `Rule` works with any objects
that support:

- `==` against one another,
- `str()`, used by `str(rule)`,
- a `to_prudensjs()` method returning a JSON object as a string, used by
  `Rule.to_prudensjs`.

A context is any iterable of such literals, for example a list.

## Usage

    from nerdrules.rule import Rule

    rule = Rule(body, head, 0.0)

`body` is an iterable of literals and `head` a single literal; `weight`
defaults to `0.0` and is stored as a float. `Rule` raises `ValueError` when
the body is `None` or empty, or when the head is `None`.

The attributes `body` (a list), `head` and `weight` are plain attributes.

What a rule offers:

- `rule.promote(amount)` adds `amount` to the weight and
  `rule.demote(amount)` subtracts it; a negative amount works the other way.
  Either way the weight is clamped at zero.
- `rule.is_applicable(context)` counts the pairs of context literal and body
  literal that are equal and returns `True` once that count reaches the
  number of body literals.
- `rule.concurs(context)` returns `True` if the head equals some literal of
  the context.
- `rule == other` is `True` when both rules have bodies of the same length,
  equal heads, and every body literal of the first rule equals some body
  literal of the second, in any order. The weight is not compared. Rules are
  not hashable.
- `rule.copy()` returns a new `Rule` with its own body list, holding the same
  literal objects, the same head and the same weight.
- `str(rule)` gives a form such as
  `(penguin, bird, antarctica) => -fly (0.0000)`, with the weight shown to
  four decimal places.
- `rule.to_prudensjs(rule_number)` gives the rule as a Prudens JS rule
  object: `{"name": "Rule<rule_number>", "body": [...], "head": ...}`, built
  from the literals' own `to_prudensjs()` output.

## What this package does not do

It holds single rules only. It provides no literal or scene types, no
collection or queue of rules, no reading of observations from files, and no
learning loop that decides when to promote or demote a rule; those are left
to the code that uses it. It has no command-line interface.

## Running the tests

    pip install -e ".[test]"
    pytest