# infra_cdk/app.py
import aws_cdk as cdk

from reviews_stack import ReviewsFragmentsStack, DEFAULT_PRODUCT_IDS

app = cdk.App()

# One stack per pull request, e.g. `cdk deploy -c stack_suffix=pr-42`
stack_suffix = app.node.try_get_context("stack_suffix")
stack_name = f"CustomerReviews-{stack_suffix}" if stack_suffix else "CustomerReviews"

ReviewsFragmentsStack(app, stack_name,
    product_ids=app.node.try_get_context("product_ids") or DEFAULT_PRODUCT_IDS,
    api_base_url=app.node.try_get_context("api_base_url"),
)

app.synth()
