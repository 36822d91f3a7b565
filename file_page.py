from flask import render_template_string

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
  <title>File Upload/Download/Delete</title>
  <style>
    body { max-width: 500px; margin: 40px auto; font-family: sans-serif; }
    h2 { border-bottom: 1px solid #ddd; padding-bottom: 0.3em; }
    ul { list-style: none; padding: 0; }
    li { margin-bottom: 1em; display: flex; align-items: center; justify-content: space-between; }
    label { display: block; margin-bottom: 0.5em; }
    input[type="file"] { margin-bottom: 1em; }
    .upload-form { border: 1px solid #ddd; padding: 1em; border-radius: 8px; }
    .download-list { margin-top: 2em; }
    .filename-link { flex: 1; text-decoration: none; color: #0074d9; word-break: break-all; }
    .actions { display: flex; gap: 0.5em; margin: 0; }
    button.delete-btn { background: #ff4136; color: #fff; border: none; padding: 0.3em 0.7em; border-radius: 4px; cursor: pointer; }
    button.delete-btn:hover { background: #e22; }
    .date { font-size: 0.8em; color: #666; margin-left: 0.7em; }
  </style>
</head>
<body>
  <h2>Upload a File</h2>
  <form class="upload-form" action="{{ url_for('upload') }}" method="post" enctype="multipart/form-data">
    <label for="file">Choose file:</label>
    <input type="file" id="file" name="file" required />
    <button type="submit">Upload</button>
  </form>
  <div class="download-list">
    <h2>Files (Latest First)</h2>
    <ul id="files">
    {%- for f in files %}
      <li>
        <a class="filename-link" href="{{ url_for('download', filename=f.name) }}" download>{{ f.name }}</a>
        <span class="date">{{ f.modified_at.strftime('%Y-%m-%d %H:%M:%S') }}</span>
        <form class="actions" action="{{ url_for('delete') }}" method="post" onsubmit="return confirm({{ ('Delete ' ~ f.name ~ '?') | tojson | forceescape }});">
          <input type="hidden" name="filename" value="{{ f.name | urlencode }}" />
          <button class="delete-btn" type="submit" title="Delete file">&times;</button>
        </form>
      </li>
    {%- endfor %}
    </ul>
  </div>
</body>
</html>
"""


def render_index(files):
    return render_template_string(INDEX_HTML, files=files)
