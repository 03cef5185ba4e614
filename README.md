# querycraft

Small, composable builders that assemble SQL text. Each builder collects
clauses in any order and renders them in the order SQL expects.

## Installation

```
pip install querycraft
```

## Builders

Each builder lives in its own module:

- `querycraft.select.Select`
- `querycraft.insert.Insert`
- `querycraft.update.Update`
- `querycraft.delete.Delete`
- `querycraft.values.Values`

Every builder method returns the builder, so calls chain. Text arguments are
stripped of surrounding whitespace. Methods that add to a list (columns,
tables, conditions, values, returning expressions, raw SQL from `raw`) keep
an identical argument only once. Methods that set a single value
(`limit`, `offset`, `insert_into`, `overriding`, `on_conflict`, `update`,
`delete_from`, `Insert.select`) replace the previous value. `with_`,
`union`, `intersect` and `except_` always append.

### Select

```python
from querycraft.select import Select

query = (
    Select()
    .select("id, login")
    .from_("users u")
    .inner_join("address a ON a.user_login = u.login")
    .where_clause("u.login = $1")
    .and_("active = true")
    .order_by("created_at desc")
    .limit("10")
    .as_string()
)
# SELECT id, login FROM users u INNER JOIN address a ON a.user_login = u.login
# WHERE u.login = $1 AND active = true ORDER BY created_at desc LIMIT 10
```

Available clauses: `select`, `from_`, `cross_join`, `inner_join`,
`left_join`, `right_join`, `where_clause` (alias `and_`), `group_by`,
`having`, `order_by`, `limit`, `offset`, `with_`.

Combine selects with `union`, `intersect` and `except_`:

```python
Select().select("login").from_("users").union(
    Select().select("login").from_("address")
).as_string()
# (SELECT login FROM users) UNION (SELECT login FROM address)
```

### Insert

```python
from querycraft.insert import Insert

Insert().insert_into("users (login, name)").values("('foo', 'Foo')").values(
    "('bar', 'Bar')"
).returning("id").as_string()
# INSERT INTO users (login, name) VALUES ('foo', 'Foo'), ('bar', 'Bar') RETURNING id
```

`Insert.select` takes a `Select` builder as the source of rows, and
`overriding` and `on_conflict` set their clauses. Clauses are rendered as
INSERT INTO, OVERRIDING, VALUES, the select, ON CONFLICT, RETURNING.

### Update and Delete

```python
from querycraft.update import Update
from querycraft.delete import Delete

Update().update("users").set("name = $1").where_clause("login = $2").as_string()
# UPDATE users SET name = $1 WHERE login = $2

Delete().delete_from("users").where_clause("id = $1").as_string()
# DELETE FROM users WHERE id = $1
```

`Update` also has `from_`, `returning`, `with_` and `and_`; `Delete` has
`returning`, `with_` and `and_`.

### Values

```python
from querycraft.values import Values

Values().values("(1, 'one')").values("(2, 'two')").as_string()
# VALUES (1, 'one'), (2, 'two')
```

### Common table expressions

Any builder can be named in a `WITH` clause:

```python
deactivated = Select().select("id").from_("users").where_clause("active = false")
Delete().with_("deactivated", deactivated).delete_from("users").where_clause(
    "id in (select * from deactivated)"
).as_string()
# WITH deactivated AS (SELECT id FROM users WHERE active = false)
# DELETE FROM users WHERE id in (select * from deactivated)
```

### Raw SQL

`raw` puts text at the very beginning of the query. `raw_before` and
`raw_after` place text around a particular clause, named by the builder's
clause enum in `querycraft.clauses` (`SelectClause`, `InsertClause`,
`UpdateClause`, `DeleteClause`, `ValuesClause`). The text is placed even
when the clause itself is empty.

```python
from querycraft.clauses import SelectClause

Select().select("*").from_("users u").raw_after(
    SelectClause.FROM, "inner join address a on u.login = a.owner_login"
).as_string()
# SELECT * FROM users u inner join address a on u.login = a.owner_login
```

### Inspecting queries

- `as_string()` and `str(builder)` return the one-line query.
- `debug()` prints a coloured, multi-line rendering framed by comment rules
  and returns the builder, so it can sit in the middle of a chain.
- `print()` prints the coloured one-line rendering and returns the builder.
- `copy()` returns an independent deep copy to branch from.
- `concat(fmts)` renders with any `Formatter`.

`querycraft.formatting` provides the `Formatter` dataclass, the `one_line()`
and `multiline()` formatters, `colorize()` (ANSI highlighting of keywords,
comments and the placeholders `$1` to `$10`) and `format_query()`. All
builders derive from `querycraft.behavior.QueryBuilder`.

## What it does not do

querycraft only produces strings. It does not connect to or run anything on a
database, does not quote, escape or bind parameters, and does not check that
the resulting SQL is valid: the text you pass in is placed as given.

## Running the tests

```
pip install -e ".[test]"
pytest
```