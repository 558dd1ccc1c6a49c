# Standard modules
import json
import logging
import sys
import threading

# Third-party modules
from invoke import task

# Local modules
import devserver

CONFIG = {
    'deploy_dir': '_site/',
    'serve_host': '127.0.0.1',
    'serve_port': 8080,
    'remote_host': 'neumann',
    'remote_path': '/var/www/example.com/'}


def pelican_command(settings, *options, path_prefix=None):
    command = ['pelican', '-s', settings] + list(options)
    if path_prefix is not None:
        # Pelican parses extra setting values as JSON
        command.append("-e 'PATH_PREFIX={}'".format(json.dumps(path_prefix)))
    return ' '.join(command)


@task
def develop(ctx):
    ctx.run('pip install -e .[test]')


@task
def build(ctx, path_prefix=None):
    ctx.run(pelican_command('pelicanconf.py', path_prefix=path_prefix))


@task
def regenerate(ctx):
    ctx.run(pelican_command('pelicanconf.py', '--autoreload'))


@task
def serve(ctx, port=None):
    """Serve the built site, answering unknown paths with its 404 page."""
    logging.basicConfig(level=logging.INFO, format='%(message)s')
    host, port = CONFIG['serve_host'], int(port or CONFIG['serve_port'])
    server = devserver.make_server(CONFIG['deploy_dir'], host, port)
    sys.stderr.write('Serving on http://{0}:{1} ...\n'.format(host, port))
    with server:
        server.serve_forever()


@task
def reserve(ctx, port=None):
    """Continuously regenerate the site and also serve it locally."""
    ctx.run(pelican_command('pelicanconf.py'))
    threads = [
        threading.Thread(target=regenerate, args=(ctx,)),
        threading.Thread(target=serve, args=(ctx, port))]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


@task
def publish(ctx, path_prefix=None):
    ctx.run(pelican_command('publishconf.py', path_prefix=path_prefix))
    ctx.run(
        'rsync -ahvz --delete {deploy_dir} '
        '{remote_host}:{remote_path}'.format(**CONFIG))


@task
def test(ctx):
    ctx.run('pytest')
