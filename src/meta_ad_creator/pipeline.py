from __future__ import annotations

import logging
from collections.abc import Mapping

from meta_ad_creator.exceptions import AdCreatorError
from meta_ad_creator.generation.client import GenerationClient
from meta_ad_creator.generation.request import build_generation_request
from meta_ad_creator.generation.tiers import TIER_PROFILES, TierProfile
from meta_ad_creator.models.ad import GeneratedCreative, ResolutionTier
from meta_ad_creator.prompts.builder import build_ad_prompt
from meta_ad_creator.session import AdSession, calling_phase

logger = logging.getLogger(__name__)


async def generate_ad(
    session: AdSession,
    client: GenerationClient,
    profiles: Mapping[ResolutionTier, TierProfile] = TIER_PROFILES,
) -> GeneratedCreative | None:
    """Run one generation for *session* and record the outcome on its result sink.

    Every :class:`AdCreatorError` is converted into the sink's error message
    here, and the sink always ends up idle again.  A submit while another
    generation is running is ignored.
    """
    sink = session.result
    if sink.is_generating:
        logger.warning("Generation already in progress; ignoring submit")
        return None

    token = session.next_request_token()
    sink.begin()
    try:
        prompt = build_ad_prompt(session.parameters, session.assets)
        request = build_generation_request(session.parameters, session.assets, prompt, profiles)
        sink.set_phase(calling_phase(request.label))
        creative = await client.generate(request)

        if not session.is_current(token):
            logger.info("Discarding stale generation result for request %d", token)
            return None
        sink.succeed(creative)
        logger.info("Ad creative generated with %s", creative.model)
        return creative
    except AdCreatorError as exc:
        logger.error("Ad generation failed (%s): %s", exc.kind.value, exc)
        if session.is_current(token):
            sink.fail(exc.kind, str(exc))
        return None
    finally:
        if session.is_current(token):
            sink.finish()
