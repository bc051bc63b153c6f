# feedmerge

Small building blocks for reading syndication feeds:

- `feedmerge.rfc822` turns RFC 822 date strings, as used in RSS feeds,
  into Unix timestamps and back again.
- `feedmerge.rss091` reads `<item>` elements of RSS 0.91 feeds.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Dates

```python
from feedmerge.rfc822 import parse_rfc822_date, format_rfc822_date, DateFormatError

timestamp = parse_rfc822_date("Tue, 03 Jun 2003 09:39:21 GMT")
text = format_rfc822_date(timestamp)   # "Tue, 03 Jun 2003 09:39:21 GMT"

try:
    parse_rfc822_date("not a date")
except DateFormatError as exc:
    print("rejected:", exc)
```

`parse_rfc822_date` accepts an optional day of the week (`Mon` to `Sun`,
followed by a comma), two- or four-digit years (two-digit years from 70
on mean 1970–1999, below 70 mean 2000–2069), optional seconds, and the
zone specifications of RFC 822: `UT`, `GMT`, the North American zones
(`EST`, `EDT`, `CST`, `CDT`, `MST`, `MDT`, `PST`, `PDT`), the military
single letters except `J`, and numeric offsets such as `+0100`.

The zone is checked for validity but not applied: the date and time of
day are read as local time, and the returned timestamp is the one that
local time corresponds to. `format_rfc822_date` is the inverse of this:
it writes the local date and time of a timestamp with English day and
month names and the suffix `GMT`. Parsing and then formatting a date
therefore gives back the same text.

Anything that does not fit, and dates the platform cannot represent,
raise `DateFormatError` (a subclass of `ValueError`).

## RSS 0.91 items

```python
from feedmerge.rss091 import Item, ItemParseError, parse_item_string

item = parse_item_string(
    "<item><title>stuff</title><link>http://bar</link>"
    "<description>This is an article about some stuff</description></item>"
)
assert item == Item("stuff", "http://bar", "This is an article about some stuff")
assert not item.is_empty()
```

`Item` is a dataclass with the fields `title`, `link` and `description`.
`Item.is_empty()` is true when the title or the link is missing; the
description is optional.

`parse_item_string` parses XML text whose root is an `<item>` element;
`parse_item` does the same for an element already parsed with
`xml.etree.ElementTree`. Comments inside the item are skipped. Both
raise `ItemParseError` (a subclass of `ValueError`) for empty or
malformed XML, a root that is not `<item>`, child elements other than
`title`, `link` and `description`, a repeated child element, stray text
between the children, and items lacking a title or a link.

## What the package does not do

It reads single items only. It does not parse a whole RSS 0.91 document
with its `<rss>` and `<channel>` elements, does not handle other feed
formats, does not download feeds, does not merge them or write them out,
and has no command-line program.

## Running the tests

```
pip install .[test]
python -m pytest
```