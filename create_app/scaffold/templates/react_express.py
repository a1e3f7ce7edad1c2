"""React + Vite frontend with an Express backend.

One function per generated file. Each is a pure function of TemplateParams,
so content can be checked without touching the filesystem.
"""
from __future__ import annotations

import re

from create_app.models import TemplateParams

SERVER_ENTRY = "server.js"
BUNDLER_CONFIG = "vite.config.js"
HTML_SHELL = "index.html"
UI_BOOTSTRAP = "src/index.jsx"
UI_ROOT = "src/App.jsx"

DEPENDENCIES: tuple[str, ...] = ("react", "react-dom", "express")
DEV_DEPENDENCIES: tuple[str, ...] = ("vite", "@vitejs/plugin-react")

_JS_REGEX_SPECIAL = re.compile(r"[\\^$.*+?()[\]{}|/]")


def _js_regex_escape(text: str) -> str:
    """Escape ``text`` for use inside a JavaScript /.../ regex literal."""
    return _JS_REGEX_SPECIAL.sub(lambda m: "\\" + m.group(0), text)


def server_entry(params: TemplateParams) -> str:
    return f"""import express from 'express';
import {{ join }} from 'path';

const app = express();
const PORT = process.env.PORT || {params.port};

// Serve static files from the {params.out_dir} directory in {params.environment_mode}
if (process.env.NODE_ENV === '{params.environment_mode}') {{
  app.use(express.static(join(process.cwd(), '{params.out_dir}')));

  app.get('*', (req, res) => {{
    res.sendFile(join(process.cwd(), '{params.out_dir}', 'index.html'));
  }});
}} else {{
  console.log('In development mode. Use Vite for the frontend.');
}}

app.listen(PORT, () => {{
  console.log('Server is running on http://localhost:' + PORT);
}});
"""


def bundler_config(params: TemplateParams) -> str:
    prefix_re = _js_regex_escape(params.api_prefix)
    return f"""import {{ defineConfig }} from 'vite';
import react from '@vitejs/plugin-react';

export default defineConfig({{
  plugins: [react()],
  build: {{
    outDir: '{params.out_dir}',
    sourcemap: true,
  }},
  server: {{
    proxy: {{
      '{params.api_prefix}': {{
        target: 'http://localhost:{params.port}',
        changeOrigin: true,
        rewrite: (path) => path.replace(/^{prefix_re}/, ''),
      }},
    }},
  }},
}});
"""


def html_shell(params: TemplateParams) -> str:
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <link rel="icon" type="image/svg+xml" href="/vite.svg" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Vite + React</title>
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="/{UI_BOOTSTRAP}"></script>
  </body>
</html>
"""


def ui_bootstrap(params: TemplateParams) -> str:
    return """import { StrictMode } from 'react';
import { createRoot } from 'react-dom/client';
import App from './App.jsx';

createRoot(document.getElementById('root')).render(
  <StrictMode>
    <App />
  </StrictMode>,
);
"""


def ui_root(params: TemplateParams) -> str:
    return """import React from 'react';

const App = () => {
  return <h1>Hello, Vite + React!</h1>;
};

export default App;
"""


# Ordered: relative path -> template function
TEMPLATES = (
    (SERVER_ENTRY, server_entry),
    (BUNDLER_CONFIG, bundler_config),
    (HTML_SHELL, html_shell),
    (UI_BOOTSTRAP, ui_bootstrap),
    (UI_ROOT, ui_root),
)


def scripts(params: TemplateParams) -> dict[str, str]:
    """Run-scripts installed into package.json."""
    return {
        "dev": "vite",
        "build": "vite build",
        "start": f"NODE_ENV={params.environment_mode} node {SERVER_ENTRY}",
    }
