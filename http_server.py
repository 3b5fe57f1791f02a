"""
Moon Phase Development Server

A localhost web server for developing and testing the moon phase widget.
Serves a preview page, the rendered PNG and the phase data as JSON.
"""

import io
import json
import math
import os
import urllib.parse
from http.server import BaseHTTPRequestHandler, HTTPServer

import moonphase
from moonphase.config import DISPLAY_WIDTH, get_server_port, load_config_from_env
from moonphase.display import MoonPhaseRenderer
from moonphase.logger import log, log_error
from moonphase.phase_calculator import get_moon_info


def _parse_number(params, name, parser):
    """Read an optional numeric query parameter, raising ValueError if bad"""
    values = params.get(name)
    if not values or values[0] == '':
        return None
    try:
        return parser(values[0])
    except ValueError:
        raise ValueError(f'Invalid {name}: {values[0]!r}')


def _parse_diameter(params):
    """Disc diameter must be a finite number in (0, DISPLAY_WIDTH]"""
    diameter = _parse_number(params, 'diameter', float)
    if diameter is None:
        return None
    if not math.isfinite(diameter) or diameter <= 0 or diameter > DISPLAY_WIDTH:
        raise ValueError(
            f'Invalid diameter: {params["diameter"][0]!r} '
            f'(expected a number between 0 and {DISPLAY_WIDTH})'
        )
    return diameter


class MoonPhaseHandler(BaseHTTPRequestHandler):
    # Disc config shared by all requests, loaded once at startup
    display_config = None

    def do_GET(self):
        """Handle GET requests."""
        parsed = urllib.parse.urlparse(self.path)
        params = urllib.parse.parse_qs(parsed.query)

        if parsed.path == '/' or parsed.path == '/index.html':
            self.serve_index()
        elif parsed.path == '/moon.png':
            self.serve_moon_image(params)
        elif parsed.path == '/api/phase':
            self.serve_phase_data(params)
        else:
            self.send_error(404, 'File not found')

    def log_message(self, format, *args):
        log(f'{self.address_string()} {format % args}')

    def serve_index(self):
        """Serve the main HTML interface from template file."""
        try:
            package_dir = os.path.dirname(os.path.abspath(moonphase.__file__))
            template_path = os.path.join(package_dir, 'templates', 'index.html')

            with open(template_path, 'r', encoding='utf-8') as f:
                html = f.read()

            self.send_response(200)
            self.send_header('Content-type', 'text/html')
            self.end_headers()
            self.wfile.write(html.encode('utf-8'))
        except FileNotFoundError:
            self.send_error(500, 'Template file not found')

    def serve_moon_image(self, params):
        """Render the widget for the requested timestamp and serve it as PNG."""
        try:
            moment = _parse_number(params, 'timestamp', int)
            diameter = _parse_diameter(params)
        except ValueError as e:
            self.send_json({'success': False, 'error': str(e)}, status=400)
            return

        moon_info = get_moon_info(moment)
        renderer = MoonPhaseRenderer(config=MoonPhaseHandler.display_config)
        image = renderer.render_moon_display(moon_info, diameter)

        img_buffer = io.BytesIO()
        image.save(img_buffer, format='PNG')
        image_data = img_buffer.getvalue()

        self.send_response(200)
        self.send_header('Content-type', 'image/png')
        self.send_header('Cache-Control', 'no-cache, no-store, must-revalidate')
        self.send_header('Pragma', 'no-cache')
        self.send_header('Expires', '0')
        self.end_headers()
        self.wfile.write(image_data)

    def serve_phase_data(self, params):
        """Return moon phase data as JSON."""
        try:
            moment = _parse_number(params, 'timestamp', int)
        except ValueError as e:
            self.send_json({'success': False, 'error': str(e)}, status=400)
            return

        moon_info = get_moon_info(moment)
        self.send_json({'success': True, 'moon': moon_info})

    def send_json(self, data, status=200):
        if status >= 400:
            log_error(data.get('error'))

        self.send_response(status)
        self.send_header('Content-type', 'application/json')
        self.send_header('Cache-Control', 'no-cache, no-store, must-revalidate')
        self.end_headers()
        self.wfile.write(json.dumps(data).encode('utf-8'))


def create_server(port=None, host=''):
    """Create the HTTP server without starting it."""
    if port is None:
        port = get_server_port()

    MoonPhaseHandler.display_config = load_config_from_env()
    return HTTPServer((host, port), MoonPhaseHandler)


def run_server(port=None):
    """Start the development server."""
    httpd = create_server(port)

    log('Moon Phase Development Server')
    log(f'Server running at http://localhost:{httpd.server_address[1]}')
    log('Press Ctrl+C to stop the server')

    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        log('Server stopped.')
    finally:
        httpd.server_close()


if __name__ == '__main__':
    run_server()
