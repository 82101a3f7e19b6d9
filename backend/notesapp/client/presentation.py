"""
Notes Client — Presentation
=============================

render(state) turns a ClientState into an HTML page. It reads nothing but
the state it is given, so the same state always renders the same markup.
Jinja2 autoescaping is on; note text is never interpreted as HTML.

Actions are exposed as data attributes (`data-action`, `data-note-id`) for
whatever event layer hosts the page to forward to NotesController.
"""

from jinja2 import Environment

from notesapp.client.state import ClientState

CREATE_LABEL = "Add Note"
UPDATE_LABEL = "Update Note"

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Notes App</title>
</head>
<body>
  <main class="container">
    <h1 class="title">Notes App</h1>
    <form class="note-form" data-action="submit"{% if state.editing_id %} data-note-id="{{ state.editing_id }}"{% endif %}>
      <input type="text" name="title" placeholder="Title" value="{{ state.form.title }}">
      <textarea name="content" placeholder="Content" rows="4">{{ state.form.content }}</textarea>
      <button type="submit">{{ submit_label }}</button>
    </form>

    <h2>All Notes</h2>
    <div class="note-grid">
    {%- for note in state.notes %}
      <div class="note-card" data-note-id="{{ note.id }}">
        <h3>{{ note.title }}</h3>
        <p>{{ note.content }}</p>
        <div class="actions">
          <button class="edit" data-action="edit" data-note-id="{{ note.id }}">Edit</button>
          <button class="delete" data-action="delete" data-note-id="{{ note.id }}">Delete</button>
        </div>
      </div>
    {%- endfor %}
    </div>
  </main>
</body>
</html>
"""

_env = Environment(autoescape=True, keep_trailing_newline=True)
_template = _env.from_string(PAGE_TEMPLATE)


def submit_label(state: ClientState) -> str:
    return UPDATE_LABEL if state.is_editing else CREATE_LABEL


def render(state: ClientState) -> str:
    return _template.render(state=state, submit_label=submit_label(state))
