import os

from invoke import task

AWS_REGION = 'us-east-1'

SERVER_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'server')


@task
def update_secret_key(ctx, name, value, stage='prod'):
    """Store a secret on the EC2 Parameter Store (see SECRET_MAP in config/settings/base.py)
    e.g.
        inv update-secret-key -n DropboxPrivateKey -v <aws-secret-key>
    """
    cmd = 'aws ssm put-parameter --name s3dropbox.{0}.{1}'.format(stage, name)
    cmd += ' --value "{}"'.format(value)
    cmd += ' --type SecureString'
    cmd += ' --region {}'.format(AWS_REGION)
    print(cmd)
    # ctx.run(cmd, pty=True)


@task
def test(ctx, path='./apps/'):
    """Run unit tests
    Args:
        path (string): path of the tests to run
    e.g.
        inv test                        # To run all tests
        inv test -p ./apps/s3policy     # to run S3 Policy tests
    """
    with ctx.cd(SERVER_DIR):
        ctx.run(f'py.test -s {path}', pty=True)
