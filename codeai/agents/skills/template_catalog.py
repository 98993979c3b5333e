"""
Template Catalog Skill

Fixed, ordered catalog of parameterized web code templates used by the
local code engine. The catalog is built once at import time and never
mutated; declaration order is significant because selection ties go to
the earlier template.

Placeholders in template bodies use {{name}} and are filled by _render,
so CSS braces and JS template syntax need no escaping.
"""

from dataclasses import dataclass
from html import escape
from typing import Callable, Dict, Iterator, List, Optional, Tuple
import re

Params = Dict[str, str]

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def _render(body: str, **values: str) -> str:
    """Substitute {{key}} placeholders; unknown keys are left untouched."""
    return _PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), body)


def _text(params: Params, key: str, default: str) -> str:
    """HTML-safe parameter value with a fixed fallback."""
    value = (params or {}).get(key)
    return escape(value) if value else default


def _identifier(params: Params, key: str, default: str) -> str:
    """Parameter usable as a JS/TS identifier, else the default."""
    value = (params or {}).get(key) or ""
    if re.fullmatch(r"[A-Za-z_]\w*", value):
        return value[:1].upper() + value[1:]
    return default


@dataclass(frozen=True)
class CodeTemplate:
    """A named, parameterized static code generator."""
    id: str
    name: str
    keywords: Tuple[str, ...]
    description: str
    language: str
    category: str
    generator: Callable[[Params], str]

    def generate(self, params: Optional[Params] = None) -> str:
        """Generate source; every template tolerates empty params."""
        return self.generator(params or {})


class TemplateCatalog:
    """Immutable, ordered collection of templates."""

    def __init__(self, templates: List[CodeTemplate], default_id: str):
        ids = [t.id for t in templates]
        if len(ids) != len(set(ids)):
            raise ValueError("Template ids must be unique")
        if default_id not in ids:
            raise ValueError(f"Default template {default_id!r} is not in the catalog")
        self._templates: Tuple[CodeTemplate, ...] = tuple(templates)
        self._by_id = {t.id: t for t in self._templates}
        self.default_id = default_id

    def __iter__(self) -> Iterator[CodeTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def get(self, template_id: str) -> Optional[CodeTemplate]:
        return self._by_id.get(template_id)

    @property
    def default(self) -> CodeTemplate:
        return self._by_id[self.default_id]

    def by_category(self) -> Dict[str, List[CodeTemplate]]:
        """Templates grouped by category, in declaration order."""
        grouped: Dict[str, List[CodeTemplate]] = {}
        for template in self._templates:
            grouped.setdefault(template.category, []).append(template)
        return grouped


# ---------------------------------------------------------------------------
# HTML templates
# ---------------------------------------------------------------------------

_HTML_BASIC = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="description" content="{{description}}">
  <title>{{title}}</title>
  <style>
    :root {
      --primary: #6366f1;
      --bg: #0f0f23;
      --surface: #1a1a2e;
      --text: #e2e8f0;
      --text-muted: #94a3b8;
    }
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body {
      font-family: 'Inter', system-ui, -apple-system, sans-serif;
      background: var(--bg);
      color: var(--text);
      line-height: 1.6;
      min-height: 100vh;
    }
    .container { max-width: 1200px; margin: 0 auto; padding: 2rem; }
    header { padding: 1.5rem 2rem; background: var(--surface); border-bottom: 1px solid rgba(255,255,255,0.1); }
    h1 { font-size: 2rem; font-weight: 700; }
    main { padding: 3rem 2rem; }
    p { color: var(--text-muted); font-size: 1.1rem; }
  </style>
</head>
<body>
  <header>
    <div class="container">
      <h1>{{heading}}</h1>
    </div>
  </header>
  <main>
    <div class="container">
      <p>Your content goes here. Start building something amazing!</p>
    </div>
  </main>
</body>
</html>"""


def _html_basic(params: Params) -> str:
    return _render(
        _HTML_BASIC,
        title=_text(params, "title", "My Page"),
        heading=_text(params, "title", "Welcome"),
        description=_text(params, "description", "A modern web page"),
    )


_HTML_LANDING = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{brand}} - The Future is Here</title>
  <style>
    :root { --primary: #6366f1; --accent: #f97316; --bg: #0a0a0f; --text: #f8fafc; --muted: #94a3b8; }
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: 'Inter', system-ui, sans-serif; background: var(--bg); color: var(--text); }
    @keyframes fadeInUp { from { opacity: 0; transform: translateY(30px); } to { opacity: 1; transform: translateY(0); } }
    .animate-in { animation: fadeInUp 0.8s ease both; }
    .delay-1 { animation-delay: 0.15s; }
    .delay-2 { animation-delay: 0.3s; }
    nav { display: flex; justify-content: space-between; align-items: center; padding: 1.5rem 8%; }
    .logo { font-weight: 800; font-size: 1.5rem; color: var(--text); text-decoration: none; }
    .nav-links a { color: var(--muted); margin-left: 2rem; text-decoration: none; transition: color 0.3s ease; }
    .nav-links a:hover { color: var(--text); }
    .hero { text-align: center; padding: 8rem 8% 6rem; background: radial-gradient(circle at top, rgba(99,102,241,0.25), transparent 60%); }
    .hero h1 { font-size: clamp(2.5rem, 6vw, 4.5rem); font-weight: 900; line-height: 1.1; }
    .hero h1 span { background: linear-gradient(90deg, var(--primary), var(--accent)); -webkit-background-clip: text; color: transparent; }
    .hero p { color: var(--muted); font-size: 1.25rem; max-width: 640px; margin: 1.5rem auto 2.5rem; }
    .btn { display: inline-block; padding: 0.9rem 2rem; border-radius: 999px; background: var(--primary); color: #fff; text-decoration: none; font-weight: 600; transition: all 0.3s ease; }
    .btn:hover { transform: translateY(-2px); box-shadow: 0 10px 30px rgba(99,102,241,0.4); }
    .features { display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: 1.5rem; padding: 4rem 8%; }
    .feature { background: rgba(255,255,255,0.04); border: 1px solid rgba(255,255,255,0.08); border-radius: 16px; padding: 2rem; transition: transform 0.3s ease; }
    .feature:hover { transform: translateY(-5px); }
    .feature h3 { margin-bottom: 0.5rem; }
    .feature p { color: var(--muted); }
    footer { text-align: center; padding: 3rem; color: var(--muted); border-top: 1px solid rgba(255,255,255,0.08); }
  </style>
</head>
<body>
  <nav>
    <a href="#" class="logo">{{brand}}</a>
    <div class="nav-links">
      <a href="#features">Features</a>
      <a href="#pricing">Pricing</a>
      <a href="#contact">Contact</a>
    </div>
  </nav>
  <section class="hero">
    <h1 class="animate-in">Build the future with <span>{{brand}}</span></h1>
    <p class="animate-in delay-1">{{description}}</p>
    <a href="#features" class="btn animate-in delay-2">Get Started</a>
  </section>
  <section class="features" id="features">
    <div class="feature"><h3>Lightning Fast</h3><p>Optimized for speed from the first byte to the last pixel.</p></div>
    <div class="feature"><h3>Secure by Default</h3><p>Best-practice security baked into every layer.</p></div>
    <div class="feature"><h3>Scales With You</h3><p>From side project to enterprise without a rewrite.</p></div>
  </section>
  <footer>
    <p>&copy; 2024 {{brand}}. All rights reserved.</p>
  </footer>
</body>
</html>"""


def _html_landing(params: Params) -> str:
    return _render(
        _HTML_LANDING,
        brand=_text(params, "title", "Brand"),
        description=_text(
            params,
            "description",
            "The most powerful platform for creating amazing digital experiences. "
            "Fast, intuitive, and built for the future.",
        ),
    )


_HTML_FORM = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{title}}</title>
  <style>
    :root { --primary: #6366f1; --error: #ef4444; --success: #10b981; --bg: #0f172a; --surface: #1e293b; --text: #f1f5f9; }
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: 'Inter', system-ui, sans-serif; background: var(--bg); color: var(--text); min-height: 100vh; display: flex; align-items: center; justify-content: center; padding: 2rem; }
    .form-card { background: var(--surface); padding: 2.5rem; border-radius: 20px; width: 100%; max-width: 480px; box-shadow: 0 25px 50px rgba(0,0,0,0.4); }
    h1 { font-size: 1.75rem; margin-bottom: 0.5rem; }
    .subtitle { color: #94a3b8; margin-bottom: 2rem; }
    .field { margin-bottom: 1.25rem; }
    label { display: block; font-size: 0.875rem; margin-bottom: 0.5rem; color: #cbd5e1; }
    input, textarea { width: 100%; padding: 0.85rem 1rem; border-radius: 10px; border: 1px solid #334155; background: #0f172a; color: var(--text); font: inherit; transition: border-color 0.3s ease, box-shadow 0.3s ease; }
    input:focus, textarea:focus { outline: none; border-color: var(--primary); box-shadow: 0 0 0 3px rgba(99,102,241,0.25); }
    .field.invalid input, .field.invalid textarea { border-color: var(--error); }
    .error { color: var(--error); font-size: 0.8rem; margin-top: 0.35rem; min-height: 1rem; }
    button { width: 100%; padding: 0.95rem; border: none; border-radius: 10px; background: var(--primary); color: #fff; font-weight: 600; font-size: 1rem; cursor: pointer; transition: all 0.3s ease; }
    button:hover { transform: translateY(-2px); filter: brightness(1.1); }
    .success { display: none; text-align: center; color: var(--success); padding: 1rem 0; }
    .success.visible { display: block; }
  </style>
</head>
<body>
  <div class="form-card">
    <h1>{{heading}}</h1>
    <p class="subtitle">We'd love to hear from you. Send us a message!</p>
    <form id="contactForm" novalidate>
      <div class="field">
        <label for="name">Name</label>
        <input type="text" id="name" name="name" placeholder="Your name" required>
        <div class="error" data-for="name"></div>
      </div>
      <div class="field">
        <label for="email">Email</label>
        <input type="email" id="email" name="email" placeholder="you@example.com" required>
        <div class="error" data-for="email"></div>
      </div>
      <div class="field">
        <label for="message">Message</label>
        <textarea id="message" name="message" rows="5" placeholder="How can we help?" required></textarea>
        <div class="error" data-for="message"></div>
      </div>
      <button type="submit">Send Message</button>
    </form>
    <div class="success" id="successMessage">Thanks! Your message has been sent.</div>
  </div>
  <script>
    const form = document.getElementById('contactForm');
    const rules = {
      name: (v) => v.trim().length >= 2 || 'Please enter at least 2 characters',
      email: (v) => /^[^\\s@]+@[^\\s@]+\\.[^\\s@]+$/.test(v) || 'Please enter a valid email',
      message: (v) => v.trim().length >= 10 || 'Message must be at least 10 characters'
    };

    function validateField(input) {
      const result = rules[input.name](input.value);
      const field = input.closest('.field');
      const error = field.querySelector('.error');
      if (result === true) {
        field.classList.remove('invalid');
        error.textContent = '';
        return true;
      }
      field.classList.add('invalid');
      error.textContent = result;
      return false;
    }

    form.querySelectorAll('input, textarea').forEach((input) => {
      input.addEventListener('blur', () => validateField(input));
    });

    form.addEventListener('submit', (event) => {
      event.preventDefault();
      const inputs = Array.from(form.querySelectorAll('input, textarea'));
      const valid = inputs.map(validateField).every(Boolean);
      if (valid) {
        form.style.display = 'none';
        document.getElementById('successMessage').classList.add('visible');
      }
    });
  </script>
</body>
</html>"""


def _html_form(params: Params) -> str:
    return _render(
        _HTML_FORM,
        title=_text(params, "title", "Contact Us"),
        heading=_text(params, "title", "Get in Touch"),
    )


_HTML_CARD_GRID = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{title}}</title>
  <style>
    :root { --primary: #6366f1; --bg: #f8fafc; --card: #ffffff; --text: #0f172a; --muted: #64748b; }
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: 'Inter', system-ui, sans-serif; background: var(--bg); color: var(--text); padding: 3rem 5%; }
    h1 { text-align: center; font-size: 2.25rem; margin-bottom: 2.5rem; }
    .grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); gap: 1.75rem; }
    .card { background: var(--card); border-radius: 16px; overflow: hidden; box-shadow: 0 4px 20px rgba(15,23,42,0.08); transition: transform 0.3s ease, box-shadow 0.3s ease; }
    .card:hover { transform: translateY(-6px); box-shadow: 0 20px 40px rgba(15,23,42,0.15); }
    .card-image { height: 180px; background: linear-gradient(135deg, #6366f1, #ec4899); }
    .card-body { padding: 1.5rem; }
    .card-body h3 { margin-bottom: 0.5rem; }
    .card-body p { color: var(--muted); font-size: 0.95rem; margin-bottom: 1rem; }
    .card-footer { display: flex; justify-content: space-between; align-items: center; }
    .price { font-weight: 700; font-size: 1.25rem; }
    .btn { padding: 0.5rem 1.1rem; border: none; border-radius: 8px; background: var(--primary); color: #fff; cursor: pointer; transition: filter 0.3s ease; }
    .btn:hover { filter: brightness(1.1); }
  </style>
</head>
<body>
  <h1>{{heading}}</h1>
  <section class="grid">
    <article class="card">
      <div class="card-image"></div>
      <div class="card-body">
        <h3>Product One</h3>
        <p>A short description that highlights what makes this item special.</p>
        <div class="card-footer"><span class="price">$49</span><button class="btn">Add to Cart</button></div>
      </div>
    </article>
    <article class="card">
      <div class="card-image"></div>
      <div class="card-body">
        <h3>Product Two</h3>
        <p>Crafted with care and built to last, ready for everyday use.</p>
        <div class="card-footer"><span class="price">$79</span><button class="btn">Add to Cart</button></div>
      </div>
    </article>
    <article class="card">
      <div class="card-image"></div>
      <div class="card-body">
        <h3>Product Three</h3>
        <p>The premium option for people who want the very best.</p>
        <div class="card-footer"><span class="price">$129</span><button class="btn">Add to Cart</button></div>
      </div>
    </article>
  </section>
</body>
</html>"""


def _html_card_grid(params: Params) -> str:
    return _render(
        _HTML_CARD_GRID,
        title=_text(params, "title", "Products"),
        heading=_text(params, "title", "Featured Products"),
    )


_HTML_NAVBAR = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{title}}</title>
  <style>
    :root { --primary: #6366f1; --bg: #0f172a; --text: #f1f5f9; --muted: #94a3b8; }
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: 'Inter', system-ui, sans-serif; background: var(--bg); color: var(--text); min-height: 200vh; }
    .navbar { position: sticky; top: 0; display: flex; justify-content: space-between; align-items: center; padding: 1rem 5%; background: rgba(15,23,42,0.8); backdrop-filter: blur(12px); border-bottom: 1px solid rgba(255,255,255,0.08); z-index: 10; }
    .logo { font-weight: 800; font-size: 1.35rem; color: var(--text); text-decoration: none; }
    .nav-links { display: flex; gap: 2rem; list-style: none; }
    .nav-links a { color: var(--muted); text-decoration: none; transition: color 0.3s ease; }
    .nav-links a:hover, .nav-links a.active { color: var(--text); }
    .hamburger { display: none; background: none; border: none; color: var(--text); font-size: 1.5rem; cursor: pointer; }
    .content { padding: 6rem 5%; text-align: center; }
    @media (max-width: 768px) {
      .hamburger { display: block; }
      .nav-links { position: absolute; top: 100%; left: 0; right: 0; flex-direction: column; gap: 0; background: var(--bg); max-height: 0; overflow: hidden; transition: max-height 0.3s ease; }
      .nav-links.open { max-height: 300px; }
      .nav-links li { padding: 1rem 5%; border-top: 1px solid rgba(255,255,255,0.06); }
    }
  </style>
</head>
<body>
  <nav class="navbar">
    <a href="#" class="logo">{{brand}}</a>
    <button class="hamburger" id="menuToggle" aria-label="Toggle menu">&#9776;</button>
    <ul class="nav-links" id="navLinks">
      <li><a href="#" class="active">Home</a></li>
      <li><a href="#">About</a></li>
      <li><a href="#">Services</a></li>
      <li><a href="#">Contact</a></li>
    </ul>
  </nav>
  <section class="content">
    <h1>Welcome to {{site}}</h1>
  </section>
  <script>
    const toggle = document.getElementById('menuToggle');
    const links = document.getElementById('navLinks');
    toggle.addEventListener('click', () => links.classList.toggle('open'));
    links.querySelectorAll('a').forEach((link) => {
      link.addEventListener('click', () => {
        links.querySelectorAll('a').forEach((a) => a.classList.remove('active'));
        link.classList.add('active');
        links.classList.remove('open');
      });
    });
  </script>
</body>
</html>"""


def _html_navbar(params: Params) -> str:
    return _render(
        _HTML_NAVBAR,
        title=_text(params, "title", "Navigation"),
        brand=_text(params, "title", "Brand"),
        site=_text(params, "title", "Our Site"),
    )


_HTML_DASHBOARD = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{title}}</title>
  <style>
    :root { --primary: #6366f1; --success: #10b981; --bg: #0b1120; --surface: #111827; --text: #e5e7eb; --muted: #9ca3af; }
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: 'Inter', system-ui, sans-serif; background: var(--bg); color: var(--text); display: flex; min-height: 100vh; }
    .sidebar { width: 240px; background: var(--surface); padding: 1.5rem; border-right: 1px solid rgba(255,255,255,0.06); }
    .sidebar-logo { font-weight: 800; font-size: 1.25rem; margin-bottom: 2rem; }
    .sidebar a { display: block; padding: 0.7rem 1rem; border-radius: 8px; color: var(--muted); text-decoration: none; margin-bottom: 0.25rem; transition: all 0.3s ease; }
    .sidebar a:hover, .sidebar a.active { background: rgba(99,102,241,0.15); color: var(--text); }
    main { flex: 1; padding: 2rem; }
    .stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 1.25rem; margin: 1.5rem 0 2rem; }
    .stat-card { background: var(--surface); padding: 1.5rem; border-radius: 14px; transition: transform 0.3s ease; }
    .stat-card:hover { transform: translateY(-4px); }
    .stat-label { color: var(--muted); font-size: 0.85rem; }
    .stat-value { font-size: 2rem; font-weight: 800; margin-top: 0.35rem; }
    .stat-change { color: var(--success); font-size: 0.85rem; }
    .chart { background: var(--surface); border-radius: 14px; padding: 1.5rem; height: 260px; display: flex; align-items: flex-end; gap: 0.75rem; }
    .bar { flex: 1; background: linear-gradient(180deg, var(--primary), rgba(99,102,241,0.3)); border-radius: 6px 6px 0 0; transition: height 0.8s ease; height: 0; }
    @media (max-width: 768px) { .sidebar { display: none; } }
  </style>
</head>
<body>
  <aside class="sidebar">
    <div class="sidebar-logo">{{brand}}</div>
    <a href="#" class="active">Overview</a>
    <a href="#">Analytics</a>
    <a href="#">Customers</a>
    <a href="#">Settings</a>
  </aside>
  <main>
    <h1>Overview</h1>
    <div class="stats">
      <div class="stat-card"><div class="stat-label">Revenue</div><div class="stat-value" data-count="48250">0</div><div class="stat-change">+12.5%</div></div>
      <div class="stat-card"><div class="stat-label">Users</div><div class="stat-value" data-count="3842">0</div><div class="stat-change">+8.1%</div></div>
      <div class="stat-card"><div class="stat-label">Orders</div><div class="stat-value" data-count="1294">0</div><div class="stat-change">+4.3%</div></div>
    </div>
    <div class="chart" id="chart"></div>
  </main>
  <script>
    document.querySelectorAll('[data-count]').forEach((el) => {
      const target = Number(el.dataset.count);
      let current = 0;
      const step = Math.ceil(target / 60);
      const timer = setInterval(() => {
        current = Math.min(current + step, target);
        el.textContent = current.toLocaleString();
        if (current === target) clearInterval(timer);
      }, 16);
    });

    const chart = document.getElementById('chart');
    [40, 65, 50, 80, 72, 95, 60].forEach((value, i) => {
      const bar = document.createElement('div');
      bar.className = 'bar';
      chart.appendChild(bar);
      setTimeout(() => { bar.style.height = value + '%'; }, 100 + i * 80);
    });
  </script>
</body>
</html>"""


def _html_dashboard(params: Params) -> str:
    return _render(
        _HTML_DASHBOARD,
        title=_text(params, "title", "Dashboard"),
        brand=_text(params, "title", "Dashboard"),
    )


# ---------------------------------------------------------------------------
# JavaScript templates
# ---------------------------------------------------------------------------

_JS_FETCH = """/**
 * Fetch API wrapper with JSON handling and error reporting
 */
const API_BASE = '{{url}}';

class ApiError extends Error {
  constructor(status, message, data) {
    super(message);
    this.status = status;
    this.data = data;
  }
}

async function request(endpoint, options = {}) {
  const response = await fetch(API_BASE + endpoint, {
    headers: { 'Content-Type': 'application/json', ...options.headers },
    ...options,
  });

  const isJson = (response.headers.get('content-type') || '').includes('application/json');
  const data = isJson ? await response.json() : await response.text();

  if (!response.ok) {
    throw new ApiError(response.status, 'Request failed with status ' + response.status, data);
  }
  return data;
}

const api = {
  get: (endpoint) => request(endpoint),
  post: (endpoint, body) => request(endpoint, { method: 'POST', body: JSON.stringify(body) }),
  put: (endpoint, body) => request(endpoint, { method: 'PUT', body: JSON.stringify(body) }),
  delete: (endpoint) => request(endpoint, { method: 'DELETE' }),
};

// Usage
async function loadUsers() {
  try {
    const users = await api.get('/users');
    console.log('Users:', users);
    const created = await api.post('/users', { name: 'John Doe', email: 'john@example.com' });
    console.log('Created:', created);
  } catch (error) {
    if (error instanceof ApiError) {
      console.error('API error', error.status, error.data);
    } else {
      console.error('Network error', error);
    }
  }
}

loadUsers();"""


def _js_fetch(params: Params) -> str:
    url = (params or {}).get("url") or "https://api.example.com"
    return _render(_JS_FETCH, url=url.replace("'", "%27"))


_JS_LOCALSTORAGE = """/**
 * LocalStorage manager with JSON serialization and expiry support
 */
const Storage = {
  prefix: 'app_',

  set(key, value, ttlMs) {
    const item = { value, expires: ttlMs ? Date.now() + ttlMs : null };
    try {
      localStorage.setItem(this.prefix + key, JSON.stringify(item));
      return true;
    } catch (error) {
      console.error('Storage quota exceeded or unavailable', error);
      return false;
    }
  },

  get(key, fallback = null) {
    const raw = localStorage.getItem(this.prefix + key);
    if (!raw) return fallback;
    try {
      const item = JSON.parse(raw);
      if (item.expires && Date.now() > item.expires) {
        this.remove(key);
        return fallback;
      }
      return item.value;
    } catch {
      return fallback;
    }
  },

  remove(key) {
    localStorage.removeItem(this.prefix + key);
  },

  clear() {
    Object.keys(localStorage)
      .filter((key) => key.startsWith(this.prefix))
      .forEach((key) => localStorage.removeItem(key));
  },
};

// Usage
Storage.set('user', { id: 1, name: 'John' });
Storage.set('session', 'abc123', 60 * 60 * 1000);
const user = Storage.get('user');
console.log(user); // { id: 1, name: 'John' }"""


def _js_localstorage(params: Params) -> str:
    return _JS_LOCALSTORAGE


_JS_DEBOUNCE = """/**
 * Debounce and throttle utilities for performance-sensitive handlers
 */
function debounce(fn, wait = 300) {
  let timeoutId;
  return function debounced(...args) {
    clearTimeout(timeoutId);
    timeoutId = setTimeout(() => fn.apply(this, args), wait);
  };
}

function throttle(fn, limit = 100) {
  let waiting = false;
  let lastArgs = null;
  return function throttled(...args) {
    if (waiting) {
      lastArgs = args;
      return;
    }
    fn.apply(this, args);
    waiting = true;
    setTimeout(() => {
      waiting = false;
      if (lastArgs) {
        throttled.apply(this, lastArgs);
        lastArgs = null;
      }
    }, limit);
  };
}

// Usage: search as the user types, without a request per keystroke
const searchInput = document.querySelector('#search');
if (searchInput) {
  searchInput.addEventListener('input', debounce((event) => {
    console.log('Searching for', event.target.value);
  }, 400));
}

// Usage: scroll handler that runs at most every 200ms
window.addEventListener('scroll', throttle(() => {
  console.log('Scroll position', window.scrollY);
}, 200));"""


def _js_debounce(params: Params) -> str:
    return _JS_DEBOUNCE


_JS_FORM_VALIDATION = """/**
 * Declarative form validation
 */
const rules = {
  required: (message = 'This field is required') => (value) => (value && String(value).trim() !== '') || message,
  minLength: (min) => (value) => String(value || '').length >= min || 'Must be at least ' + min + ' characters',
  email: () => (value) => /^[^\\s@]+@[^\\s@]+\\.[^\\s@]+$/.test(value) || 'Invalid email address',
  password: () => (value) =>
    (/[A-Z]/.test(value) && /[0-9]/.test(value) && String(value).length >= 8) ||
    'Password needs 8+ characters, a number and an uppercase letter',
};

function validate(values, schema) {
  const errors = {};
  Object.keys(schema).forEach((field) => {
    for (const rule of schema[field]) {
      const result = rule(values[field]);
      if (result !== true) {
        errors[field] = result;
        break;
      }
    }
  });
  return { isValid: Object.keys(errors).length === 0, errors };
}

// Usage
const schema = {
  name: [rules.required(), rules.minLength(2)],
  email: [rules.required(), rules.email()],
  password: [rules.required(), rules.password()],
};

const result = validate({
  name: 'John',
  email: 'john@example.com',
  password: 'Secret123',
}, schema);

console.log(result);
// { isValid: true, errors: {} }"""


def _js_form_validation(params: Params) -> str:
    return _JS_FORM_VALIDATION


_JS_TODO_APP = """/**
 * Todo app with localStorage persistence
 * Expects: <input id="todoInput">, <button id="addTodo">, <ul id="todoList">
 */
const STORAGE_KEY = 'todos';

let todos = JSON.parse(localStorage.getItem(STORAGE_KEY) || '[]');

function save() {
  localStorage.setItem(STORAGE_KEY, JSON.stringify(todos));
}

function addTodo(text) {
  const trimmed = text.trim();
  if (!trimmed) return;
  todos.push({
    id: Date.now().toString(36) + Math.random().toString(36).slice(2),
    text: trimmed,
    completed: false,
  });
  save();
  render();
}

function toggleTodo(id) {
  todos = todos.map((todo) => (todo.id === id ? { ...todo, completed: !todo.completed } : todo));
  save();
  render();
}

function deleteTodo(id) {
  todos = todos.filter((todo) => todo.id !== id);
  save();
  render();
}

function render() {
  const list = document.getElementById('todoList');
  list.innerHTML = '';
  todos.forEach((todo) => {
    const item = document.createElement('li');
    item.className = todo.completed ? 'completed' : '';

    const label = document.createElement('span');
    label.textContent = todo.text;
    label.addEventListener('click', () => toggleTodo(todo.id));

    const remove = document.createElement('button');
    remove.textContent = 'Delete';
    remove.addEventListener('click', () => deleteTodo(todo.id));

    item.append(label, remove);
    list.appendChild(item);
  });
}

document.getElementById('addTodo').addEventListener('click', () => {
  const input = document.getElementById('todoInput');
  addTodo(input.value);
  input.value = '';
});

render();"""


def _js_todo_app(params: Params) -> str:
    return _JS_TODO_APP


# ---------------------------------------------------------------------------
# React templates
# ---------------------------------------------------------------------------

_REACT_COMPONENT = """import { useState, useCallback } from 'react';

interface {{name}}Props {
  initialValue?: number;
  step?: number;
  onChange?: (value: number) => void;
}

export function {{name}}({
  initialValue = 0,
  step = 1,
  onChange,
}: {{name}}Props) {
  const [count, setCount] = useState(initialValue);

  const update = useCallback((next: number) => {
    setCount(next);
    onChange?.(next);
  }, [onChange]);

  return (
    <div className="counter">
      <button onClick={() => update(count - step)} aria-label="Decrement">-</button>
      <span className="counter-value">{count}</span>
      <button onClick={() => update(count + step)} aria-label="Increment">+</button>
      <button onClick={() => update(initialValue)}>Reset</button>
    </div>
  );
}

export default {{name}};"""


def _react_component(params: Params) -> str:
    return _render(_REACT_COMPONENT, name=_identifier(params, "name", "Counter"))


_REACT_FORM = """import { useState, FormEvent } from 'react';

interface FormData {
  name: string;
  email: string;
  message: string;
}

type FormErrors = Partial<Record<keyof FormData, string>>;

function validate(data: FormData): FormErrors {
  const errors: FormErrors = {};
  if (data.name.trim().length < 2) errors.name = 'Name must be at least 2 characters';
  if (!/^[^\\s@]+@[^\\s@]+\\.[^\\s@]+$/.test(data.email)) errors.email = 'Please enter a valid email';
  if (data.message.trim().length < 10) errors.message = 'Message must be at least 10 characters';
  return errors;
}

export function {{name}}() {
  const [formData, setFormData] = useState<FormData>({
    name: '',
    email: '',
    message: '',
  });
  const [errors, setErrors] = useState<FormErrors>({});
  const [isSubmitting, setIsSubmitting] = useState(false);
  const [submitted, setSubmitted] = useState(false);

  const handleChange = (field: keyof FormData) => (value: string) => {
    setFormData((prev) => ({ ...prev, [field]: value }));
    setErrors((prev) => ({ ...prev, [field]: undefined }));
  };

  const handleSubmit = async (event: FormEvent) => {
    event.preventDefault();
    const nextErrors = validate(formData);
    setErrors(nextErrors);
    if (Object.keys(nextErrors).length > 0) return;

    setIsSubmitting(true);
    await new Promise((resolve) => setTimeout(resolve, 800));
    setIsSubmitting(false);
    setSubmitted(true);
    setFormData({ name: '', email: '', message: '' });
  };

  if (submitted) {
    return <p className="success">Thanks! We'll be in touch soon.</p>;
  }

  return (
    <form onSubmit={handleSubmit} noValidate>
      <label>
        Name
        <input value={formData.name} onChange={(e) => handleChange('name')(e.target.value)} />
        {errors.name && <span className="error">{errors.name}</span>}
      </label>
      <label>
        Email
        <input type="email" value={formData.email} onChange={(e) => handleChange('email')(e.target.value)} />
        {errors.email && <span className="error">{errors.email}</span>}
      </label>
      <label>
        Message
        <textarea value={formData.message} onChange={(e) => handleChange('message')(e.target.value)} />
        {errors.message && <span className="error">{errors.message}</span>}
      </label>
      <button type="submit" disabled={isSubmitting}>
        {isSubmitting ? 'Sending...' : 'Send'}
      </button>
    </form>
  );
}

export default {{name}};"""


def _react_form(params: Params) -> str:
    return _render(_REACT_FORM, name=_identifier(params, "name", "ContactForm"))


_REACT_MODAL = """import { ReactNode, useEffect, useRef } from 'react';
import { createPortal } from 'react-dom';

interface ModalProps {
  isOpen: boolean;
  onClose: () => void;
  title: string;
  children: ReactNode;
}

export function Modal({ isOpen, onClose, title, children }: ModalProps) {
  const dialogRef = useRef<HTMLDivElement>(null);

  useEffect(() => {
    if (!isOpen) return;
    const previouslyFocused = document.activeElement as HTMLElement | null;
    dialogRef.current?.focus();

    const onKeyDown = (event: KeyboardEvent) => {
      if (event.key === 'Escape') onClose();
    };
    document.addEventListener('keydown', onKeyDown);
    document.body.style.overflow = 'hidden';

    return () => {
      document.removeEventListener('keydown', onKeyDown);
      document.body.style.overflow = '';
      previouslyFocused?.focus();
    };
  }, [isOpen, onClose]);

  if (!isOpen) return null;

  return createPortal(
    <div className="modal-backdrop" onClick={onClose}>
      <div
        ref={dialogRef}
        className="modal"
        role="dialog"
        aria-modal="true"
        aria-labelledby="modal-title"
        tabIndex={-1}
        onClick={(event) => event.stopPropagation()}
      >
        <header className="modal-header">
          <h2 id="modal-title">{title}</h2>
          <button onClick={onClose} aria-label="Close">&times;</button>
        </header>
        <div className="modal-body">{children}</div>
      </div>
    </div>,
    document.body
  );
}

export default Modal;"""


def _react_modal(params: Params) -> str:
    return _REACT_MODAL


_REACT_FETCH_HOOK = """import { useState, useEffect, useCallback, useRef } from 'react';

interface FetchState<T> {
  data: T | null;
  error: Error | null;
  isLoading: boolean;
}

export function useFetch<T = unknown>(url: string, options?: RequestInit) {
  const [state, setState] = useState<FetchState<T>>({
    data: null,
    error: null,
    isLoading: true,
  });
  const controllerRef = useRef<AbortController | null>(null);

  const fetchData = useCallback(async () => {
    controllerRef.current?.abort();
    const controller = new AbortController();
    controllerRef.current = controller;

    setState((prev) => ({ ...prev, isLoading: true, error: null }));
    try {
      const response = await fetch(url, { ...options, signal: controller.signal });
      if (!response.ok) throw new Error('HTTP ' + response.status);
      const data = (await response.json()) as T;
      setState({ data, error: null, isLoading: false });
    } catch (error) {
      if ((error as Error).name === 'AbortError') return;
      setState({ data: null, error: error as Error, isLoading: false });
    }
  }, [url]);

  useEffect(() => {
    fetchData();
    return () => controllerRef.current?.abort();
  }, [fetchData]);

  return { ...state, refetch: fetchData };
}

// Usage
// const { data, error, isLoading, refetch } = useFetch<User[]>('/api/users');"""


def _react_fetch_hook(params: Params) -> str:
    return _REACT_FETCH_HOOK


# ---------------------------------------------------------------------------
# CSS templates
# ---------------------------------------------------------------------------

_CSS_FLEXBOX = """/**
 * Essential flexbox patterns
 */

/* Perfect centering */
.center {
  display: flex;
  align-items: center;
  justify-content: center;
  min-height: 100vh;
}

/* Row with space between */
.row-between {
  display: flex;
  align-items: center;
  justify-content: space-between;
  gap: 1rem;
}

/* Vertical stack */
.stack {
  display: flex;
  flex-direction: column;
  gap: 1rem;
}

/* Wrapping row of equal items */
.wrap {
  display: flex;
  flex-wrap: wrap;
  gap: 1.5rem;
}

.wrap > * {
  flex: 1 1 240px;
}

/* Sticky footer layout */
.page {
  display: flex;
  flex-direction: column;
  min-height: 100vh;
}

.page > main {
  flex: 1;
}

/* Sidebar + content */
.with-sidebar {
  display: flex;
  gap: 2rem;
}

.with-sidebar > aside {
  flex: 0 0 260px;
}

.with-sidebar > main {
  flex: 1;
  min-width: 0;
}

@media (max-width: 768px) {
  .with-sidebar {
    flex-direction: column;
  }
}"""


def _css_flexbox(params: Params) -> str:
    return _CSS_FLEXBOX


_CSS_GRID = """/**
 * Modern CSS Grid patterns
 */

/* Responsive auto-fill grid */
.grid-auto {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(250px, 1fr));
  gap: 1.5rem;
}

/* Classic 12-column grid */
.grid-12 {
  display: grid;
  grid-template-columns: repeat(12, 1fr);
  gap: 1rem;
}

.span-4 { grid-column: span 4; }
.span-6 { grid-column: span 6; }
.span-8 { grid-column: span 8; }
.span-12 { grid-column: span 12; }

/* Holy grail layout with named areas */
.layout {
  display: grid;
  grid-template-areas:
    "header header header"
    "nav    main   aside"
    "footer footer footer";
  grid-template-columns: 220px 1fr 220px;
  grid-template-rows: auto 1fr auto;
  min-height: 100vh;
}

.layout > header { grid-area: header; }
.layout > nav { grid-area: nav; }
.layout > main { grid-area: main; }
.layout > aside { grid-area: aside; }
.layout > footer { grid-area: footer; }

/* Masonry-style dense packing */
.grid-dense {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(180px, 1fr));
  grid-auto-rows: 120px;
  grid-auto-flow: dense;
  gap: 1rem;
}

.grid-dense .tall { grid-row: span 2; }
.grid-dense .wide { grid-column: span 2; }

@media (max-width: 768px) {
  .layout {
    grid-template-areas: "header" "nav" "main" "aside" "footer";
    grid-template-columns: 1fr;
  }
  .grid-12 > * { grid-column: span 12; }
}"""


def _css_grid(params: Params) -> str:
    return _CSS_GRID


_CSS_ANIMATIONS = """/**
 * Smooth animations and transitions
 */

@keyframes fadeIn {
  from { opacity: 0; }
  to { opacity: 1; }
}

@keyframes fadeInUp {
  from { opacity: 0; transform: translateY(30px); }
  to { opacity: 1; transform: translateY(0); }
}

@keyframes slideInLeft {
  from { opacity: 0; transform: translateX(-40px); }
  to { opacity: 1; transform: translateX(0); }
}

@keyframes spin {
  to { transform: rotate(360deg); }
}

@keyframes pulse {
  0%, 100% { opacity: 1; }
  50% { opacity: 0.5; }
}

.fade-in { animation: fadeIn 0.6s ease both; }
.fade-in-up { animation: fadeInUp 0.6s ease both; }
.slide-in-left { animation: slideInLeft 0.6s ease both; }
.pulse { animation: pulse 2s ease-in-out infinite; }

/* Staggered children */
.stagger > * { animation: fadeInUp 0.5s ease both; }
.stagger > *:nth-child(2) { animation-delay: 0.1s; }
.stagger > *:nth-child(3) { animation-delay: 0.2s; }
.stagger > *:nth-child(4) { animation-delay: 0.3s; }

/* Hover lift */
.hover-lift {
  transition: transform 0.3s ease, box-shadow 0.3s ease;
}

.hover-lift:hover {
  transform: translateY(-5px);
  box-shadow: 0 20px 40px rgba(0, 0, 0, 0.2);
}

/* Loading spinner */
.spinner {
  width: 40px;
  height: 40px;
  border: 4px solid rgba(99, 102, 241, 0.2);
  border-top-color: #6366f1;
  border-radius: 50%;
  animation: spin 0.8s linear infinite;
}

@media (prefers-reduced-motion: reduce) {
  *, *::before, *::after {
    animation-duration: 0.01ms !important;
    animation-iteration-count: 1 !important;
    transition-duration: 0.01ms !important;
  }
}"""


def _css_animations(params: Params) -> str:
    return _CSS_ANIMATIONS


# ---------------------------------------------------------------------------
# Advanced templates
# ---------------------------------------------------------------------------

_HTML_CYBER_TERMINAL = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="description" content="{{brand}} - Advanced cybersecurity threat monitoring and detection system.">
  <title>{{brand}} - Threat Monitor</title>
  <style>
    :root { --bg: #0a0a0a; --primary: #00ff88; --cyan: #00d4ff; --alert: #ff3366; --text: #e0e0e0; }
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { background: var(--bg); color: var(--text); font-family: 'JetBrains Mono', 'Fira Code', monospace; min-height: 100vh; padding: 2rem; }
    @keyframes blink { 0%, 50% { opacity: 1; } 51%, 100% { opacity: 0; } }
    @keyframes pulse { 0%, 100% { box-shadow: 0 0 0 0 rgba(0,255,136,0.6); } 50% { box-shadow: 0 0 0 8px rgba(0,255,136,0); } }
    header { display: flex; justify-content: space-between; align-items: center; margin-bottom: 2rem; }
    .logo { font-size: 1.5rem; font-weight: 700; color: var(--primary); text-shadow: 0 0 12px rgba(0,255,136,0.5); }
    .status { display: flex; align-items: center; gap: 0.5rem; color: var(--primary); }
    .status-dot { width: 10px; height: 10px; border-radius: 50%; background: var(--primary); animation: pulse 2s infinite; }
    .terminal { background: #050505; border: 1px solid rgba(0,255,136,0.3); border-radius: 10px; box-shadow: 0 0 30px rgba(0,255,136,0.1); overflow: hidden; }
    .terminal-bar { display: flex; gap: 0.5rem; padding: 0.75rem 1rem; background: #111; }
    .terminal-bar span { width: 12px; height: 12px; border-radius: 50%; background: #333; }
    .terminal-body { padding: 1.25rem; min-height: 320px; font-size: 0.95rem; line-height: 1.7; }
    .line { white-space: pre-wrap; }
    .ok { color: var(--primary); }
    .info { color: var(--cyan); }
    .alert { color: var(--alert); }
    .cursor { display: inline-block; width: 8px; height: 1.1em; background: var(--primary); vertical-align: text-bottom; animation: blink 1s step-end infinite; }
  </style>
</head>
<body>
  <header>
    <div class="logo">{{brand}}</div>
    <div class="status"><span class="status-dot"></span>MONITORING ACTIVE</div>
  </header>
  <div class="terminal">
    <div class="terminal-bar"><span></span><span></span><span></span></div>
    <div class="terminal-body" id="terminal"></div>
  </div>
  <script>
    const lines = [
      { text: '[init] Starting {{brand_js}} threat detection engine...', cls: 'info' },
      { text: '[scan] Checking network interfaces... SECURE', cls: 'ok' },
      { text: '[scan] Verifying firewall rules... SECURE', cls: 'ok' },
      { text: '[detect] Suspicious login attempt from 203.0.113.42 - ALERT', cls: 'alert' },
      { text: '[block] Source address quarantined', cls: 'ok' },
      { text: '[monitor] Real-time protection enabled', cls: 'info' }
    ];
    const terminal = document.getElementById('terminal');
    const cursor = document.createElement('span');
    cursor.className = 'cursor';

    let lineIndex = 0;
    function typeNextLine() {
      if (lineIndex >= lines.length) {
        terminal.appendChild(cursor);
        return;
      }
      const { text, cls } = lines[lineIndex];
      const el = document.createElement('div');
      el.className = 'line ' + cls;
      terminal.appendChild(el);
      el.appendChild(cursor);

      let charIndex = 0;
      const timer = setInterval(() => {
        el.insertBefore(document.createTextNode(text[charIndex]), cursor);
        charIndex += 1;
        if (charIndex >= text.length) {
          clearInterval(timer);
          lineIndex += 1;
          setTimeout(typeNextLine, 400);
        }
      }, 25);
    }
    typeNextLine();
  </script>
</body>
</html>"""


def _html_cyber_terminal(params: Params) -> str:
    brand = _text(params, "title", "SecureShield")
    return _render(
        _HTML_CYBER_TERMINAL,
        brand=brand,
        brand_js=brand.replace("\\", "\\\\").replace("'", "\\'"),
    )


def build_default_catalog() -> TemplateCatalog:
    """Build the catalog in its canonical declaration order."""
    templates = [
        # HTML
        CodeTemplate(
            id="html-basic",
            name="Basic HTML Page",
            keywords=("html", "page", "basic", "simple", "webpage", "website", "starter"),
            description="A basic HTML5 page structure",
            language="html",
            category="HTML/Web Pages",
            generator=_html_basic,
        ),
        CodeTemplate(
            id="html-landing",
            name="Landing Page",
            keywords=("landing", "hero", "marketing", "homepage", "home", "startup", "saas", "product"),
            description="A stunning marketing landing page",
            language="html",
            category="HTML/Web Pages",
            generator=_html_landing,
        ),
        CodeTemplate(
            id="html-form",
            name="Contact Form",
            keywords=("form", "contact", "input", "submit", "email", "signup", "register", "login", "auth"),
            description="A beautiful contact/signup form",
            language="html",
            category="HTML/Web Pages",
            generator=_html_form,
        ),
        CodeTemplate(
            id="html-card-grid",
            name="Card Grid Layout",
            keywords=("card", "grid", "gallery", "products", "portfolio", "items", "list", "shop", "store", "ecommerce"),
            description="A responsive card grid layout",
            language="html",
            category="HTML/Web Pages",
            generator=_html_card_grid,
        ),
        CodeTemplate(
            id="html-navbar",
            name="Navigation Bar",
            keywords=("navbar", "navigation", "menu", "header", "nav", "topbar"),
            description="A modern responsive navigation bar",
            language="html",
            category="HTML/Web Pages",
            generator=_html_navbar,
        ),
        CodeTemplate(
            id="html-dashboard",
            name="Dashboard Layout",
            keywords=("dashboard", "admin", "panel", "analytics", "stats", "metrics"),
            description="A modern dashboard layout with sidebar",
            language="html",
            category="HTML/Web Pages",
            generator=_html_dashboard,
        ),
        # JavaScript
        CodeTemplate(
            id="js-fetch",
            name="Fetch API Request",
            keywords=("fetch", "api", "http", "request", "get", "post", "ajax", "rest"),
            description="Modern HTTP requests with fetch",
            language="javascript",
            category="JavaScript",
            generator=_js_fetch,
        ),
        CodeTemplate(
            id="js-localstorage",
            name="LocalStorage Manager",
            keywords=("localstorage", "storage", "save", "persist", "cache", "store", "session"),
            description="Type-safe localStorage utility",
            language="javascript",
            category="JavaScript",
            generator=_js_localstorage,
        ),
        CodeTemplate(
            id="js-debounce",
            name="Debounce & Throttle",
            keywords=("debounce", "throttle", "delay", "performance", "optimize", "search", "scroll"),
            description="Performance optimization utilities",
            language="javascript",
            category="JavaScript",
            generator=_js_debounce,
        ),
        CodeTemplate(
            id="js-form-validation",
            name="Form Validation",
            keywords=("validate", "validation", "form", "input", "email", "password", "check", "rules"),
            description="Comprehensive form validation",
            language="javascript",
            category="JavaScript",
            generator=_js_form_validation,
        ),
        CodeTemplate(
            id="js-todo-app",
            name="Todo App",
            keywords=("todo", "task", "list", "add", "delete", "complete", "crud", "app"),
            description="Complete todo application",
            language="javascript",
            category="JavaScript",
            generator=_js_todo_app,
        ),
        # React
        CodeTemplate(
            id="react-component",
            name="React Component",
            keywords=("react", "component", "functional", "hook", "usestate", "typescript"),
            description="Modern React functional component",
            language="tsx",
            category="React",
            generator=_react_component,
        ),
        CodeTemplate(
            id="react-form",
            name="React Form",
            keywords=("react", "form", "input", "submit", "controlled", "validation"),
            description="React form with validation",
            language="tsx",
            category="React",
            generator=_react_form,
        ),
        CodeTemplate(
            id="react-modal",
            name="React Modal",
            keywords=("react", "modal", "popup", "dialog", "overlay", "portal"),
            description="Accessible modal component",
            language="tsx",
            category="React",
            generator=_react_modal,
        ),
        CodeTemplate(
            id="react-fetch-hook",
            name="React useFetch Hook",
            keywords=("react", "hook", "fetch", "api", "usefetch", "custom", "data"),
            description="Custom data fetching hook",
            language="tsx",
            category="React",
            generator=_react_fetch_hook,
        ),
        # CSS
        CodeTemplate(
            id="css-flexbox",
            name="Flexbox Layouts",
            keywords=("flexbox", "flex", "layout", "center", "align", "row", "column"),
            description="Essential flexbox patterns",
            language="css",
            category="CSS",
            generator=_css_flexbox,
        ),
        CodeTemplate(
            id="css-grid",
            name="CSS Grid Layouts",
            keywords=("grid", "layout", "columns", "responsive", "auto", "template"),
            description="Modern CSS Grid patterns",
            language="css",
            category="CSS",
            generator=_css_grid,
        ),
        CodeTemplate(
            id="css-animations",
            name="CSS Animations",
            keywords=("animation", "animate", "transition", "hover", "keyframes", "fade", "slide", "spin"),
            description="Smooth animations and transitions",
            language="css",
            category="CSS",
            generator=_css_animations,
        ),
        # Advanced
        CodeTemplate(
            id="html-cyber-terminal",
            name="Cybersecurity Terminal",
            keywords=("terminal", "cyber", "security", "hacker", "console", "cli", "command",
                      "scan", "monitor", "threat", "detection"),
            description="An animated cybersecurity terminal with typing effect",
            language="html",
            category="Advanced",
            generator=_html_cyber_terminal,
        ),
    ]
    return TemplateCatalog(templates, default_id="html-basic")


# Built once at import; pass explicitly to the selector to use another catalog
default_catalog = build_default_catalog()
