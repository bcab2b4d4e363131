"""HTML views served by the message board."""

from __future__ import annotations

from html import escape

HOME_TEMPLATE = """
<h1>Message Board</h1>
<p>Request count since last start: {count}</p>
<h2>Save a message</h2>
<form action="/save" method="POST">
  <input type="text" name="message" placeholder="Enter a message">
  <button type="submit">Save</button>
</form>
<h2>Stored Messages</h2>
<p><a href="/messages">View Messages</a></p>
"""

MESSAGES_TEMPLATE = """
<h1>Stored Messages</h1>
<pre>{messages}</pre>
<a href="/">Back</a>
"""


def render_home(count: int) -> str:
    return HOME_TEMPLATE.format(count=count)


def render_messages(messages: str) -> str:
    return MESSAGES_TEMPLATE.format(messages=escape(messages, quote=False))
