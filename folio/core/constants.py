"""
Constants shared by the site builder and the preview server.
"""

# ─────────────────────────── serving ───────────────────────────
# Extension -> Content-Type. Keys are lower-case and include the dot.
MIME_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".xml": "application/xml",
    ".txt": "text/plain",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".eot": "application/vnd.ms-fontobject",
}

DEFAULT_MIME_TYPE = "application/octet-stream"

INDEX_FILE = "index.html"

# ─────────────────────────── building ──────────────────────────
# Pages listed in sitemap.xml, relative to the site URL, with their priority
SITEMAP_PAGES: list[tuple[str, str]] = [
    ("", "1.0"),
    ("about_me.html", "0.8"),
    ("contact.html", "0.8"),
]

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Written in place of a missing static file when on_missing_asset is "placeholder".
# Files not listed here get an empty placeholder.
PLACEHOLDER_CONTENT: dict[str, str] = {
    "style.css": """
/* Portfolio styles */
.animate-fade-in {
  animation: fadeIn 0.5s ease-in forwards;
}

@keyframes fadeIn {
  from { opacity: 0; }
  to { opacity: 1; }
}

.tap-highlight-transparent {
  -webkit-tap-highlight-color: transparent;
}

/* Scrollbar for dark mode */
::-webkit-scrollbar {
  width: 8px;
}

::-webkit-scrollbar-track {
  background: transparent;
}

::-webkit-scrollbar-thumb {
  background: rgba(156, 163, 175, 0.5);
  border-radius: 4px;
}

::-webkit-scrollbar-thumb:hover {
  background: rgba(156, 163, 175, 0.8);
}

/* Photo hover effects */
.group:hover .group-hover\\:translate-y-0 {
  transform: translateY(0);
}

@media (max-width: 768px) {
  .container {
    padding-left: 1rem;
    padding-right: 1rem;
  }
}
""",
    "fade_in.js": """
// Fade images in as they scroll into view
document.addEventListener('DOMContentLoaded', function() {
  const images = document.querySelectorAll('img');

  const imageObserver = new IntersectionObserver((entries, observer) => {
    entries.forEach(entry => {
      if (entry.isIntersecting) {
        entry.target.style.opacity = '1';
        observer.unobserve(entry.target);
      }
    });
  });

  images.forEach(img => imageObserver.observe(img));

  document.body.style.opacity = '1';
});
""",
    "menu.js": """
// Mobile menu toggle
function menuToggle() {
  const menu = document.getElementById('menu');
  const ulMenu = document.getElementById('ulMenu');

  if (menu.style.height === '0px' || menu.style.height === '') {
    menu.style.height = 'auto';
    const height = menu.scrollHeight;
    menu.style.height = '0px';

    setTimeout(() => {
      menu.style.height = height + 'px';
    }, 10);

    ulMenu.style.paddingTop = '1rem';
  } else {
    menu.style.height = '0px';
    ulMenu.style.paddingTop = '0px';
  }
}

// Close the mobile menu after a link is followed
document.addEventListener('DOMContentLoaded', function() {
  document.querySelectorAll('#ulMenu a').forEach(link => {
    link.addEventListener('click', () => {
      if (window.innerWidth < 768) {
        menuToggle();
      }
    });
  });
});
""",
}
