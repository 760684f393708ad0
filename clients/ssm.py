import os

import boto3


class SSMClient:
    def __init__(self):
        self.client = boto3.client("ssm", region_name=os.environ["AWS_REGION"])

    def get_ssm_parameters(self, parameter_names, with_decryption=False):
        """Return a dict of SSM parameter values keyed by parameter name.

        Parameters that don't exist are left out.
        """
        parameters = self.client.get_parameters(
            Names=parameter_names, WithDecryption=with_decryption
        )["Parameters"]

        return {p["Name"]: p["Value"] for p in parameters}
