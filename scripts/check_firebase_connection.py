#!/usr/bin/env python3
import os
import sys
import click

# Add the parent directory to sys.path to fix imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from config.firebase_config import load_service_account, DATABASE_URL, PROJECT_ID
from src.services import FirebaseConnectionTester, MAX_LIST_USERS

@click.group()
def cli():
    """Firebase connection diagnostics"""
    pass

@cli.command()
@click.option('--collection', default='users', show_default=True, help='Firestore collection to read from')
@click.option('--limit', default=1, show_default=True, type=click.IntRange(min=1), help='Maximum documents to fetch')
@click.option('--max-users', default=10, show_default=True, type=click.IntRange(1, MAX_LIST_USERS), help='Maximum Auth users to list')
@click.option('--database-url', default=DATABASE_URL, show_default=True, help='Realtime Database URL for the app')
def check(collection: str, limit: int, max_users: int, database_url: str):
    """Read from Firestore and list Auth users to verify connectivity"""
    try:
        service_account = load_service_account()
    except Exception as e:
        click.echo(click.style(f'❌ Firebase test failed: {str(e)}', fg='red'))
        sys.exit(1)

    tester = FirebaseConnectionTester(service_account, database_url)
    report = tester.run(collection=collection, limit=limit, max_results=max_users)

    if not report.success:
        click.echo(click.style('❌ Firebase connection check failed', fg='red'))
        sys.exit(1)
    click.echo(click.style('✅ Firebase connection check passed', fg='green'))

@cli.command('show-config')
def show_config():
    """Show which Firebase project and credentials will be used"""
    try:
        service_account = load_service_account()
    except Exception as e:
        click.echo(click.style(f'❌ Loading service account failed: {str(e)}', fg='red'))
        sys.exit(1)

    click.echo(f"Project ID: {service_account.project_id or PROJECT_ID}")
    click.echo(f"Database URL: {DATABASE_URL}")
    click.echo(f"Client email: {service_account.client_email or '(not set)'}")
    if service_account.is_complete:
        click.echo(click.style('✅ Private key present', fg='green'))
    else:
        click.echo(click.style('❌ Credential fields missing: private key, key id or client email', fg='red'))

if __name__ == '__main__':
    cli()
