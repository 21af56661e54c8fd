"""Static landing page served at the root path."""

LANDING_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Exercise Tracker</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      form { margin-bottom: 1.5rem; }
      input { padding: 0.4rem 0.6rem; width: 280px; display: block; margin: 0.3rem 0; }
      button { padding: 0.4rem 0.8rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
      code { background: #f6f6f6; padding: 0 0.2rem; }
    </style>
  </head>
  <body>
    <h1>Exercise Tracker</h1>
    <form id="user-form">
      <h3>Create a new user</h3>
      <code>POST /api/users</code>
      <input id="username" placeholder="username" required />
      <button type="submit">Submit</button>
    </form>
    <form id="exercise-form">
      <h3>Add exercises</h3>
      <code>POST /api/users/:_id/exercises</code>
      <input id="uid" placeholder=":_id" required />
      <input id="description" placeholder="description*" maxlength="25" required />
      <input id="duration" type="number" min="1" required
             placeholder="duration* (mins.)" />
      <input id="date" placeholder="date (yyyy-mm-dd)" />
      <button type="submit">Submit</button>
    </form>
    <p>
      <strong>GET user's exercise log:</strong>
      <code>GET /api/users/:_id/logs?[from][&amp;to][&amp;limit]</code><br />
      <code>[ ]</code> = optional, <code>from, to</code> = dates (yyyy-mm-dd),
      <code>limit</code> = number
    </p>
    <pre id="output">Ready.</pre>
    <script>
      async function send(path, body) {
        const output = document.getElementById('output');
        output.textContent = 'Loading...';
        const res = await fetch(path, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body)
        });
        const data = await res.json();
        output.textContent = (res.ok ? '' : 'Error ' + res.status + ': ')
          + JSON.stringify(data, null, 2);
      }
      document.getElementById('user-form').addEventListener('submit', (event) => {
        event.preventDefault();
        send('/api/users', { username: document.getElementById('username').value });
      });
      document.getElementById('exercise-form').addEventListener('submit', (event) => {
        event.preventDefault();
        const uid = document.getElementById('uid').value;
        const body = {
          description: document.getElementById('description').value,
          duration: Number(document.getElementById('duration').value)
        };
        const date = document.getElementById('date').value;
        if (date) { body.date = date; }
        send('/api/users/' + encodeURIComponent(uid) + '/exercises', body);
      });
    </script>
  </body>
</html>
"""
