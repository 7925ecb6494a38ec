import os

from itertools import product

from discrete_bayes.executions import training_time_comparison

csv_folder = "out/csv/"

#create directories
if not os.path.exists(csv_folder):
    os.makedirs(csv_folder)

#Training time comparison
combinations = list(product([100, 1000, 10000], [2, 5, 10, 20], [2, 5, 10]))
# combinations += list(product([100000], [5], [2, 5]))
seed = 200
n_iterations = 5

result = training_time_comparison(combinations=combinations,
                                  n_iterations=n_iterations,
                                  seed=seed,
                                  verbose=1)
result.to_csv(csv_folder+"training_time_comparison.csv", index=False)
