"""AWS data provider."""

from lazylogger.controllers.aws.provider import AwsProvider
from lazylogger.controllers.aws.session import AwsClientFactory

__all__ = ["AwsClientFactory", "AwsProvider"]
