"""HTML pages served by the router. No templating engine, no external CSS."""

from __future__ import annotations

from html import escape

_STYLE = """
      body{font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Ubuntu, Cantarell, Noto Sans, Arial; margin:2rem; line-height:1.55}
      input,button{font:inherit; padding:.5rem .7rem}
      label{display:block; margin:.75rem 0 .35rem}
      .muted{color:#0008}
      code{background:#0001; padding:.1rem .35rem; border-radius:4px}
"""


def page(body: str, title: str = "Servidor de palíndromos") -> str:
    return f"""<!doctype html>
<html lang="es">
  <head>
    <meta charset="utf-8" />
    <title>{escape(title)}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>{_STYLE}    </style>
  </head>
  <body>{body}</body>
</html>"""


def form_page() -> str:
    return page(
        title="Comprobar palíndromo",
        body="""
    <h1>Comprobar palíndromo</h1>
    <p class="muted">Este formulario envía una petición <code>GET</code> al endpoint <code>/comprobar</code>.</p>
    <form action="/comprobar" method="GET">
      <label for="palabra">Palabra</label>
      <input id="palabra" name="palabra" type="text" required autocomplete="off" />
      <button type="submit">Comprobar</button>
    </form>
    <p class="muted">Ejemplos: radar, reconocer, “Anita lava la tina”, “Sé verlas al revés”.</p>
""",
    )


def not_found_page() -> str:
    return page(
        title="404",
        body='<h1>404 - Ruta no encontrada</h1><p><a href="/">Volver</a></p>',
    )
