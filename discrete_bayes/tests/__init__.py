from ._count_store_test import test_bump_marginal_creates_entries
from ._count_store_test import test_bump_joint_creates_one_direction
from ._count_store_test import test_bump_joint_rejects_self_pair
from ._count_store_test import test_expand_schema_backfills_zeros
from ._count_store_test import test_joint_distinguishes_missing_from_zero
from ._count_store_test import test_read_accessors
from ._count_store_test import test_snapshot_is_isolated
from ._count_store_test import test_from_snapshot_restores_and_completes
from ._count_store_test import test_from_snapshot_rejects_malformed_state
from ._count_store_test import test_marginal_frame
from ._count_store_test import test_joint_frame
from ._count_store_test import test_from_snapshot_rejects_asymmetric_or_orphan_counts
from ._inference_test import test_unknown_feature
from ._inference_test import test_marginal_distribution
from ._inference_test import test_conditioned_distribution
from ._inference_test import test_unseen_conditioning_value_gives_zeros
from ._inference_test import test_target_as_conditioning_gives_zeros
from ._inference_test import test_product_of_conditionals
from ._inference_test import test_zero_support_excludes_attribute
from ._inference_test import test_one_unseen_value_zeroes_every_attribute
from ._inference_test import test_normalization
from ._inference_test import test_classify_reflects_later_training
from ._inference_test import test_invalid_input
from ._naive_bayes_test import test_color_shape_scenario
from ._naive_bayes_test import test_fit_matches_incremental_training
from ._naive_bayes_test import test_fit_resets_and_partial_fit_accumulates
from ._naive_bayes_test import test_fit_with_missing_cells
from ._naive_bayes_test import test_fit_with_array_and_records
from ._naive_bayes_test import test_state_snapshot_and_resume
from ._naive_bayes_test import test_fit_resets_to_initial_state
from ._naive_bayes_test import test_params_and_clone
from ._naive_bayes_test import test_set_params_state_rebuilds_counts
from ._naive_bayes_test import test_predict_proba
from ._naive_bayes_test import test_predict_and_score
from ._naive_bayes_test import test_predict_before_training
from ._naive_bayes_test import test_verbose_summary
from ._naive_bayes_test import test_score_and_predict_proba_accept_generators
from ._naive_bayes_test import test_f1_score_ignores_unsupported_predictions_as_classes
from ._time_performance_test import test_training_time_comparison
from ._trainer_test import test_train_counts_marginals_and_symmetric_joints
from ._trainer_test import test_completeness_after_late_features
from ._trainer_test import test_schema_expands_only_on_novel_pairs
from ._trainer_test import test_empty_observation_is_a_no_op
from ._trainer_test import test_single_feature_observation_records_marginal_only
from ._trainer_test import test_invalid_observation_leaves_counts_untouched
from ._utils_test import test_check_observation
from ._utils_test import test_invalid_input_is_a_value_error
from ._utils_test import test_check_state
from ._utils_test import test_iter_observations_from_frame
from ._utils_test import test_iter_observations_from_array
from ._utils_test import test_iter_observations_from_records
from ._utils_test import test_column_values
from ._utils_test import test_get_scorer
from ._utils_test import test_generated_data


__all__ = [
    "test_bump_marginal_creates_entries",
    "test_bump_joint_creates_one_direction",
    "test_bump_joint_rejects_self_pair",
    "test_expand_schema_backfills_zeros",
    "test_joint_distinguishes_missing_from_zero",
    "test_read_accessors",
    "test_snapshot_is_isolated",
    "test_from_snapshot_restores_and_completes",
    "test_from_snapshot_rejects_malformed_state",
    "test_marginal_frame",
    "test_joint_frame",
    "test_from_snapshot_rejects_asymmetric_or_orphan_counts",
    "test_unknown_feature",
    "test_marginal_distribution",
    "test_conditioned_distribution",
    "test_unseen_conditioning_value_gives_zeros",
    "test_target_as_conditioning_gives_zeros",
    "test_product_of_conditionals",
    "test_zero_support_excludes_attribute",
    "test_one_unseen_value_zeroes_every_attribute",
    "test_normalization",
    "test_classify_reflects_later_training",
    "test_invalid_input",
    "test_color_shape_scenario",
    "test_fit_matches_incremental_training",
    "test_fit_resets_and_partial_fit_accumulates",
    "test_fit_with_missing_cells",
    "test_fit_with_array_and_records",
    "test_state_snapshot_and_resume",
    "test_fit_resets_to_initial_state",
    "test_params_and_clone",
    "test_set_params_state_rebuilds_counts",
    "test_predict_proba",
    "test_predict_and_score",
    "test_predict_before_training",
    "test_verbose_summary",
    "test_score_and_predict_proba_accept_generators",
    "test_f1_score_ignores_unsupported_predictions_as_classes",
    "test_training_time_comparison",
    "test_train_counts_marginals_and_symmetric_joints",
    "test_completeness_after_late_features",
    "test_schema_expands_only_on_novel_pairs",
    "test_empty_observation_is_a_no_op",
    "test_single_feature_observation_records_marginal_only",
    "test_invalid_observation_leaves_counts_untouched",
    "test_check_observation",
    "test_invalid_input_is_a_value_error",
    "test_check_state",
    "test_iter_observations_from_frame",
    "test_iter_observations_from_array",
    "test_iter_observations_from_records",
    "test_column_values",
    "test_get_scorer",
    "test_generated_data",
]
