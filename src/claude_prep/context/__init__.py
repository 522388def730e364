"""Context threaded through the CLI via click's ctx.obj.

Import from submodules:
- context: PrepContext, create_context
- helpers: require_context, require_github_token
- testing: context_for_test
"""
