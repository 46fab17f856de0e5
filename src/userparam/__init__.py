"""userparam - typed validation of user parameters.

Raw request values are validated against declarative per-parameter settings.
The ``user`` type resolves a value to a user name, IP address, IP range,
interwiki name or account id, and accepts only the kinds a parameter allows.

See :mod:`userparam.validator` for the validation API and
:mod:`userparam.identity` for identities and the collaborators used to
resolve them.
"""

__version__ = "0.1.0"
